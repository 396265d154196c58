"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/ at runtime
    - Domain rule violations are raised here and converted to Result data in services/
"""
