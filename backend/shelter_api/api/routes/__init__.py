"""Route Modules - one file per resource/concern.

Invariants:
    - Resource modules expose a builder that takes the repository provider
    - Routes never contain persistence logic (delegate to repositories)

Design Decisions:
    - Explicit registration in main.create_app over auto-discovery
"""
