"""
DOMAIN SERVICES - Pure membership rules

No I/O here: every function works on already-resolved entities so the rules
can be tested without repositories.
"""

from secret_nick.domain.services.membership import (
    MissingMemberReason,
    classify_missing_member,
    ensure_admin,
    ensure_not_self,
)

__all__ = [
    "MissingMemberReason",
    "classify_missing_member",
    "ensure_admin",
    "ensure_not_self",
]
