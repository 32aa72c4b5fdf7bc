"""API Layer — FastAPI routes, the auth guard, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes never format error bodies; they raise and the handlers normalize

Design Decisions:
    - Thin routes delegate to services
"""
