"""
Storage subsystem.

Components:
- atomic_file.py: whole-file JSON snapshots with temp-file + rename writes
- guard.py: single-permit asyncio lock serializing access to one file
- repository.py: generic CRUD repository composing the two
- errors.py: StoreError hierarchy (corrupt file vs failed write)
"""
