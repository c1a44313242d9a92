"""
Task subsystem.

Components:
- task_models.py: the Task dataclass
- errors.py: registry error hierarchy
- task_registry.py: in-memory ordered registry (add/rename/delete/toggle/reorder/list)
- task_api.py: async request handlers for a transport layer
"""
