"""Access-control classifier.

Classification is a ranked rule list over keyword presence in the full text.
Real contracts often show several idioms at once (an ``Ownable`` base next to
``grantRole`` calls), so the first rule that fires wins:

    1. multi-sig   2. role-based   3. owner   4. none

Reordering the rules changes the result for such contracts.
"""

from __future__ import annotations

from contractguard.analyzer.models import AccessControlPattern
from contractguard.analyzer.patterns import (
    MULTISIG_RE,
    OWNER_RE,
    RENOUNCE_OWNERSHIP_RE,
    RENOUNCE_ROLE_RE,
    ROLE_BASED_RE,
    ROLE_DECL_RE,
    TRANSFER_OWNERSHIP_RE,
)


def extract_roles(source: str) -> list[str]:
    """Role identifiers declared on ``bytes32`` lines, unique, in order."""
    roles: dict[str, None] = {}
    for match in ROLE_DECL_RE.finditer(source):
        roles.setdefault(match.group(1), None)
    return list(roles)


def detect_access_control(source: str) -> AccessControlPattern:
    if MULTISIG_RE.search(source):
        return AccessControlPattern.multi_sig(
            has_renounce=bool(RENOUNCE_OWNERSHIP_RE.search(source)),
            has_transfer=bool(TRANSFER_OWNERSHIP_RE.search(source)),
        )

    if ROLE_BASED_RE.search(source):
        return AccessControlPattern.role_based(
            roles=extract_roles(source),
            has_renounce=bool(RENOUNCE_ROLE_RE.search(source)),
        )

    if OWNER_RE.search(source):
        return AccessControlPattern.owner(
            has_renounce=bool(RENOUNCE_OWNERSHIP_RE.search(source)),
            has_transfer=bool(TRANSFER_OWNERSHIP_RE.search(source)),
        )

    return AccessControlPattern.none()
