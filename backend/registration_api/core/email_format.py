"""Email Format — syntactic check of an address against a fixed pattern.

Invariants:
    - Whole-string match: the pattern must cover the entire input
    - Top-level label is 2+ ASCII letters
    - No DNS lookup, no mailbox check, no IDN support, no length bounds
"""

import re

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_valid_email(email: str) -> bool:
    """True if email looks like local@domain.tld."""
    if not isinstance(email, str):
        return False
    # fullmatch, not match: "$" would also accept a trailing newline
    return EMAIL_PATTERN.fullmatch(email) is not None
