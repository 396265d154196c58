"""Infrastructure Layer — database sessions, repositories and logging setup.

Invariants:
    - Repositories translate between ORM rows and core/ aggregates or DTOs;
      core/ never sees an ORM instance
    - SQLAlchemy exceptions are mapped to DatabaseError in database.py
"""
