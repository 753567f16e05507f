"""
Library catalog subsystem.

Components:
- library_models.py: data structures (LibraryItem, ReadStatus)
- library_store.py: JSON-backed repository factory
- library_queries.py: search filters and summary
"""
