"""Core Layer - pure routing rules, error types and collaborator contracts.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Outcome rules and messages kept apart from FastAPI so they test without HTTP
"""
