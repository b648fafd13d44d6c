"""Registration API Package — greeting and user registration endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, the app is built by main.create_app()
"""
