"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app() (no auto-discovery)
    - All errors leave as {"error": message} JSON bodies

Design Decisions:
    - Thin routes delegate to core/ functions
"""
