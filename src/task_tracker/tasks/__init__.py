"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority) and result values
- task_store.py: in-memory storage + query/update operations
"""
