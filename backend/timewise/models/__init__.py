"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model imported here so Base.metadata is complete for create_all and Alembic
"""

from timewise.models.habit import Habit  # noqa: F401
