"""Pydantic Schemas - record shapes returned by the API.

Invariants:
    - Records are built from ORM rows (from_attributes) and dumped in JSON mode
    - Request bodies are not validated here; the collaborator decides

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
