"""
Task subsystem.

Components:
- task_models.py: Task dataclass and its JSON mapping
- task_store.py: JSON-file storage with add/list/done/delete/find
"""
