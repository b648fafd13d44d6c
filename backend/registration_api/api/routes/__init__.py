"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with its tags
    - Routes never contain validation logic (delegate to core/)
"""
