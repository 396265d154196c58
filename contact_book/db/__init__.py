"""Database Metadata — the SQLAlchemy declarative Base shared by ORM models and Alembic."""
