"""Data model of a parsed contract.

Every field carries a safe default (empty list, ``False``, ``"Unknown"``,
``AccessControlType.NONE``) so that a result is fully constructed even for
empty or non-contract input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Visibility(str, Enum):
    PUBLIC = "public"
    EXTERNAL = "external"
    INTERNAL = "internal"
    PRIVATE = "private"


class AccessControlType(str, Enum):
    NONE = "none"
    OWNER = "owner"
    ROLE_BASED = "role-based"
    MULTI_SIG = "multi-sig"


@dataclass(frozen=True)
class Parameter:
    """Function parameter as split from the raw parameter list."""
    name: str
    type: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "type": self.type}


@dataclass
class FunctionInfo:
    """Function declaration found by the function scanner."""
    name: str
    visibility: Visibility = Visibility.PUBLIC
    modifiers: list[str] = field(default_factory=list)  # guard names, vocabulary order
    parameters: list[Parameter] = field(default_factory=list)
    return_type: str | None = None
    is_payable: bool = False
    state_changing: bool = True

    @property
    def is_exposed(self) -> bool:
        """Callable from outside the contract."""
        return self.visibility in (Visibility.PUBLIC, Visibility.EXTERNAL)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "visibility": self.visibility.value,
            "modifiers": list(self.modifiers),
            "parameters": [p.to_dict() for p in self.parameters],
            "return_type": self.return_type,
            "is_payable": self.is_payable,
            "state_changing": self.state_changing,
        }


@dataclass
class VariableInfo:
    """State variable declaration found by the state-variable scanner."""
    name: str
    type: str
    visibility: Visibility = Visibility.INTERNAL
    is_constant: bool = False

    @property
    def is_mutable(self) -> bool:
        return not self.is_constant

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "visibility": self.visibility.value,
            "is_constant": self.is_constant,
            "is_mutable": self.is_mutable,
        }


@dataclass
class AccessControlPattern:
    """Classified access-control scheme, tagged by ``type``.

    ``roles`` only applies to role-based control and ``has_transfer`` only to
    owner and multi-sig control; both stay at their defaults otherwise.
    """
    type: AccessControlType = AccessControlType.NONE
    roles: list[str] = field(default_factory=list)
    has_renounce: bool = False
    has_transfer: bool = False

    @classmethod
    def none(cls) -> "AccessControlPattern":
        return cls()

    @classmethod
    def owner(cls, has_renounce: bool = False, has_transfer: bool = False) -> "AccessControlPattern":
        return cls(AccessControlType.OWNER, has_renounce=has_renounce, has_transfer=has_transfer)

    @classmethod
    def multi_sig(cls, has_renounce: bool = False, has_transfer: bool = False) -> "AccessControlPattern":
        return cls(AccessControlType.MULTI_SIG, has_renounce=has_renounce, has_transfer=has_transfer)

    @classmethod
    def role_based(cls, roles: list[str], has_renounce: bool = False) -> "AccessControlPattern":
        return cls(AccessControlType.ROLE_BASED, roles=list(roles), has_renounce=has_renounce)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.type is AccessControlType.ROLE_BASED:
            data["roles"] = list(self.roles)
            data["has_renounce"] = self.has_renounce
        elif self.type is not AccessControlType.NONE:
            data["has_renounce"] = self.has_renounce
            data["has_transfer"] = self.has_transfer
        return data


@dataclass
class ParsedContract:
    """Structural summary of one contract source text."""
    name: str = "Unknown"
    functions: list[FunctionInfo] = field(default_factory=list)
    state_variables: list[VariableInfo] = field(default_factory=list)
    access_control: AccessControlPattern = field(default_factory=AccessControlPattern)
    inherits_from: list[str] = field(default_factory=list)
    has_upgradeability: bool = False
    has_selfdestruct: bool = False
    has_delegate_call: bool = False
    uses_assembly: bool = False
    external_calls: list[str] = field(default_factory=list)  # unique, first-seen order
    events: list[str] = field(default_factory=list)

    @property
    def exposed_functions(self) -> list[FunctionInfo]:
        return [f for f in self.functions if f.is_exposed]

    @property
    def payable_functions(self) -> list[FunctionInfo]:
        return [f for f in self.functions if f.is_payable]

    @property
    def state_changing_exposed_functions(self) -> list[FunctionInfo]:
        return [f for f in self.functions if f.state_changing and f.is_exposed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "functions": [f.to_dict() for f in self.functions],
            "state_variables": [v.to_dict() for v in self.state_variables],
            "access_control": self.access_control.to_dict(),
            "inherits_from": list(self.inherits_from),
            "has_upgradeability": self.has_upgradeability,
            "has_selfdestruct": self.has_selfdestruct,
            "has_delegate_call": self.has_delegate_call,
            "uses_assembly": self.uses_assembly,
            "external_calls": list(self.external_calls),
            "events": list(self.events),
        }
