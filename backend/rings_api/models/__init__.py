"""ORM Models — SQLAlchemy declarative models for users and rings.

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from rings_api.models.user import User  # noqa: F401
from rings_api.models.ring import Ring  # noqa: F401
