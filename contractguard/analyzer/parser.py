"""Aggregator — composes every facet into one ``ParsedContract``."""

from __future__ import annotations

import logging
import time

from contractguard.analyzer.access_control import detect_access_control
from contractguard.analyzer.models import ParsedContract
from contractguard.analyzer.risk import detect_risk_indicators
from contractguard.analyzer.scanners import (
    extract_contract_name,
    extract_events,
    extract_external_calls,
    extract_functions,
    extract_inheritance,
    extract_state_variables,
)

logger = logging.getLogger(__name__)


def parse_contract(source: str) -> ParsedContract:
    """Extract the structural summary of ``source``.

    Never raises on input shape: empty or non-contract text yields a result
    made entirely of defaults. A fresh object is built on every call.
    """
    start = time.perf_counter()
    risk = detect_risk_indicators(source)

    parsed = ParsedContract(
        name=extract_contract_name(source),
        functions=extract_functions(source),
        state_variables=extract_state_variables(source),
        access_control=detect_access_control(source),
        inherits_from=extract_inheritance(source),
        has_upgradeability=risk.has_upgradeability,
        has_selfdestruct=risk.has_selfdestruct,
        has_delegate_call=risk.has_delegate_call,
        uses_assembly=risk.uses_assembly,
        external_calls=extract_external_calls(source),
        events=extract_events(source),
    )

    duration_ms = (time.perf_counter() - start) * 1000
    logger.debug(
        "Parsed %s: %d functions, %d state variables, access control %s",
        parsed.name,
        len(parsed.functions),
        len(parsed.state_variables),
        parsed.access_control.type.value,
        extra={"contract_name": parsed.name, "duration_ms": round(duration_ms, 2)},
    )
    return parsed
