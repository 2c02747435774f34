"""ORM Models - SQLAlchemy declarative models for the shelter entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - A Dog optionally references one Adopter; an Adopter owns zero or more Dogs

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from shelter_api.models.adopter import Adopter  # noqa: F401
from shelter_api.models.dog import Dog  # noqa: F401
