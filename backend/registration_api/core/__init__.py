"""Core Layer — pure registration logic, no IO, no FastAPI.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic
"""
