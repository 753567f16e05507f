"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Completion)
- task_store.py: JSON-backed repository factory
- task_queries.py: default ordering, filters and summary
"""
