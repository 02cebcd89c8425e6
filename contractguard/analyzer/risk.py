"""Risk indicator detector.

Four independent, case-insensitive presence checks. A flag says a dangerous
capability is mentioned in the text, not that the contract is vulnerable.
"""

from __future__ import annotations

from dataclasses import dataclass

from contractguard.analyzer.patterns import (
    ASSEMBLY_RE,
    DELEGATECALL_RE,
    SELFDESTRUCT_RE,
    UPGRADE_RE,
)


@dataclass(frozen=True)
class RiskIndicators:
    has_upgradeability: bool = False
    has_selfdestruct: bool = False
    has_delegate_call: bool = False
    uses_assembly: bool = False


def has_selfdestruct(source: str) -> bool:
    return bool(SELFDESTRUCT_RE.search(source))


def has_delegate_call(source: str) -> bool:
    return bool(DELEGATECALL_RE.search(source))


def uses_assembly(source: str) -> bool:
    return bool(ASSEMBLY_RE.search(source))


def has_upgradeability(source: str) -> bool:
    """True if any upgrade keyword appears anywhere, even inside identifiers."""
    return bool(UPGRADE_RE.search(source))


def detect_risk_indicators(source: str) -> RiskIndicators:
    return RiskIndicators(
        has_upgradeability=has_upgradeability(source),
        has_selfdestruct=has_selfdestruct(source),
        has_delegate_call=has_delegate_call(source),
        uses_assembly=uses_assembly(source),
    )
