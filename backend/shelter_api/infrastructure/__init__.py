"""Infrastructure Layer - database access, repositories and logging setup.

Invariants:
    - Repositories implement the Protocols in core/repository_protocols.py
    - All SQLAlchemy errors leave this layer as DataAccessError

Design Decisions:
    - Concrete collaborators live here; routers receive them through dependencies
"""
