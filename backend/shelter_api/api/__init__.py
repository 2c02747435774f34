"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routers registered explicitly in main.create_app (no auto-discovery)
    - All endpoints except GET / return JSON bodies

Design Decisions:
    - Thin routes delegate to repositories received through dependencies
"""
