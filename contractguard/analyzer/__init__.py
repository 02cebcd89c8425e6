"""Structural extraction engine for smart-contract source text."""

from contractguard.analyzer.models import (
    AccessControlPattern,
    AccessControlType,
    FunctionInfo,
    Parameter,
    ParsedContract,
    VariableInfo,
    Visibility,
)
from contractguard.analyzer.parser import parse_contract
from contractguard.analyzer.summary import create_contract_summary

__all__ = [
    "AccessControlPattern",
    "AccessControlType",
    "FunctionInfo",
    "Parameter",
    "ParsedContract",
    "VariableInfo",
    "Visibility",
    "create_contract_summary",
    "parse_contract",
]
