"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Color, CLEAR) and input parsers
- task_store.py: in-memory ordered store with dense ids + snapshots
- history.py: bounded undo history of store snapshots
"""
