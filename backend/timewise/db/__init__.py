"""Database package: declarative Base shared by ORM models and Alembic."""
