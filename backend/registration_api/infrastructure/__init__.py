"""Infrastructure Layer — logging and HTTP cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
