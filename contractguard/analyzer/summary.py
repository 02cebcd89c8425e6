"""Summary formatter — renders a ``ParsedContract`` as the report text.

The reasoning service is prompted with this text, so its section layout is
part of the contract with that consumer. Output depends only on the
``ParsedContract`` and is byte-identical for equal inputs.
"""

from __future__ import annotations

from contractguard.analyzer.models import (
    AccessControlType,
    FunctionInfo,
    ParsedContract,
    VariableInfo,
)

_WARN = "⚠️ YES"
_ALARM = "🚨 YES"


def _flag(value: bool, marker: str = _WARN) -> str:
    return marker if value else "No"


def _bullets(items: list[str], empty: str = "None") -> str:
    return "\n".join(f"- {item}" for item in items) if items else empty


def _function_line(func: FunctionInfo) -> str:
    line = f"{func.name}({', '.join(p.type for p in func.parameters)})"
    if func.is_payable:
        line += " [payable]"
    if func.modifiers:
        line += f" [{', '.join(func.modifiers)}]"
    return line


def _variable_line(var: VariableInfo) -> str:
    line = f"{var.name}: {var.type} [{var.visibility.value}]"
    if var.is_constant:
        line += " (constant)"
    return line


def _access_control_lines(parsed: ParsedContract) -> list[str]:
    ac = parsed.access_control
    lines = [f"- Pattern: {ac.type.value}"]

    if ac.type is AccessControlType.ROLE_BASED:
        lines.append(f"- Roles: {', '.join(ac.roles) if ac.roles else 'None'}")
        if ac.has_renounce:
            lines.append("- Can renounce roles")
    elif ac.type is not AccessControlType.NONE:
        if ac.has_renounce:
            lines.append("- Can renounce ownership")
        if ac.has_transfer:
            lines.append("- Can transfer ownership")

    return lines


def create_contract_summary(parsed: ParsedContract) -> str:
    """Render the fixed-layout report consumed by the reasoning prompt."""
    exposed = parsed.exposed_functions
    payable = parsed.payable_functions
    state_changing = parsed.state_changing_exposed_functions

    sections = [
        f"## Contract: {parsed.name}",
        "### Inheritance\n"
        + (", ".join(parsed.inherits_from) if parsed.inherits_from else "None"),
        "### Access Control\n" + "\n".join(_access_control_lines(parsed)),
        "### Risk Indicators\n"
        f"- Upgradeability: {_flag(parsed.has_upgradeability)}\n"
        f"- Selfdestruct: {_flag(parsed.has_selfdestruct, _ALARM)}\n"
        f"- Delegatecall: {_flag(parsed.has_delegate_call)}\n"
        f"- Assembly usage: {_flag(parsed.uses_assembly)}",
        f"### Public/External Functions ({len(exposed)})\n"
        + _bullets([_function_line(f) for f in exposed]),
        f"### Payable Functions ({len(payable)})\n"
        + _bullets([f.name for f in payable]),
        f"### State-Changing External Functions ({len(state_changing)})\n"
        + _bullets([f.name for f in state_changing]),
        f"### State Variables ({len(parsed.state_variables)})\n"
        + _bullets([_variable_line(v) for v in parsed.state_variables]),
        "### External Calls\n"
        + (", ".join(parsed.external_calls) if parsed.external_calls else "None detected"),
        "### Events\n" + (", ".join(parsed.events) if parsed.events else "None"),
    ]
    return "\n\n".join(sections)
