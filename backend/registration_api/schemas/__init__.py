"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format at the system boundary
    - Business rules (presence, email syntax) live in core/, not here
"""
