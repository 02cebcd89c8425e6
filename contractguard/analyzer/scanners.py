"""Lexical scanners — one facet of the contract per function.

Each scanner takes the raw source text and returns its facet without looking
at any other scanner's output, so they can be tested (and run) independently.
None of them raises on malformed input; the worst case is an empty facet.

Function, state-variable, event and external-call scanning starts at the
first contract declaration. Text without a declaration yields empty facets.
"""

from __future__ import annotations

from contractguard.analyzer.models import FunctionInfo, Parameter, VariableInfo, Visibility
from contractguard.analyzer.patterns import (
    CONTRACT_DECL_RE,
    EVENT_DECL_RE,
    EXTERNAL_CALL_RE,
    FUNCTION_DECL_RE,
    GUARD_MODIFIERS,
    MODIFIER_WINDOW_AFTER,
    MODIFIER_WINDOW_BEFORE,
    STATE_VAR_RE,
)

UNKNOWN_CONTRACT = "Unknown"


def _contract_scope(source: str) -> str:
    """Text from the first contract declaration onward, or ``""``."""
    match = CONTRACT_DECL_RE.search(source)
    return source[match.start():] if match else ""


# ── Contract identity ────────────────────────────────────────────────────────


def extract_contract_name(source: str) -> str:
    match = CONTRACT_DECL_RE.search(source)
    return match.group(1) if match else UNKNOWN_CONTRACT


def extract_inheritance(source: str) -> list[str]:
    """Base contracts listed in the first declaration's ``is`` clause."""
    match = CONTRACT_DECL_RE.search(source)
    if not match or not match.group(2):
        return []
    return [base.strip() for base in match.group(2).split(",") if base.strip()]


# ── Functions ────────────────────────────────────────────────────────────────


def parse_parameters(params: str) -> list[Parameter]:
    """Split a raw parameter list into (name, type) pairs.

    The first whitespace-separated token is the type and the last one the
    name, so ``uint256 amount`` and ``bytes calldata data`` both work, while
    an unnamed ``uint256`` reports its type as the name too.
    """
    if not params.strip():
        return []

    parameters = []
    for raw in params.split(","):
        parts = raw.split()
        parameters.append(Parameter(
            name=parts[-1] if parts else "unnamed",
            type=parts[0] if parts else "unknown",
        ))
    return parameters


def extract_modifiers(context: str) -> list[str]:
    """Guard modifiers named anywhere in ``context``, in vocabulary order."""
    return [mod for mod in GUARD_MODIFIERS if mod in context]


def extract_functions(source: str) -> list[FunctionInfo]:
    scope = _contract_scope(source)
    functions: list[FunctionInfo] = []

    for match in FUNCTION_DECL_RE.finditer(scope):
        name, params, visibility, mutability, returns = match.groups()

        window = scope[
            max(0, match.start() - MODIFIER_WINDOW_BEFORE):match.end() + MODIFIER_WINDOW_AFTER
        ]

        functions.append(FunctionInfo(
            name=name,
            visibility=Visibility(visibility) if visibility else Visibility.PUBLIC,
            modifiers=extract_modifiers(window),
            parameters=parse_parameters(params),
            return_type=returns.replace("returns", "", 1).strip() if returns else None,
            is_payable=mutability == "payable",
            state_changing=mutability not in ("view", "pure"),
        ))

    return functions


# ── State variables ──────────────────────────────────────────────────────────


def extract_state_variables(source: str) -> list[VariableInfo]:
    """Declarations directly inside a contract body (brace depth 1).

    Locals, loop counters and struct fields sit deeper and are skipped.
    """
    scope = _contract_scope(source)
    variables: list[VariableInfo] = []
    depth, counted_to = 0, 0

    for match in STATE_VAR_RE.finditer(scope):
        segment = scope[counted_to:match.start()]
        depth += segment.count("{") - segment.count("}")
        counted_to = match.start()
        if depth != 1:
            continue

        var_type, visibility, mutability, name = match.groups()
        variables.append(VariableInfo(
            name=name,
            type=" ".join(var_type.split()),
            visibility=Visibility(visibility) if visibility else Visibility.INTERNAL,
            is_constant=mutability in ("constant", "immutable"),
        ))

    return variables


# ── Events and external calls ────────────────────────────────────────────────


def extract_events(source: str) -> list[str]:
    """Every event name in declaration order; duplicates are kept."""
    return [m.group(1) for m in EVENT_DECL_RE.finditer(_contract_scope(source))]


def extract_external_calls(source: str) -> list[str]:
    """Receivers of call/transfer/send idioms, unique, in first-seen order."""
    targets: dict[str, None] = {}
    for match in EXTERNAL_CALL_RE.finditer(_contract_scope(source)):
        target = match.group(1) or match.group(2) or match.group(3)
        targets.setdefault(target, None)
    return list(targets)
