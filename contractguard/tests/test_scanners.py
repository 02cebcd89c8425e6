"""Tests for contractguard.analyzer.scanners — one facet per scanner."""

from __future__ import annotations

from contractguard.analyzer.models import Parameter, Visibility
from contractguard.analyzer.scanners import (
    UNKNOWN_CONTRACT,
    extract_contract_name,
    extract_events,
    extract_external_calls,
    extract_functions,
    extract_inheritance,
    extract_modifiers,
    extract_state_variables,
    parse_parameters,
)


# ── Contract identity ────────────────────────────────────────────────────────


class TestContractName:

    def test_first_declaration_wins(self):
        src = "contract First {}\ncontract Second {}"
        assert extract_contract_name(src) == "First"

    def test_missing_declaration(self):
        assert extract_contract_name("library Math {}") == UNKNOWN_CONTRACT

    def test_empty_input(self):
        assert extract_contract_name("") == "Unknown"


class TestInheritance:

    def test_bases_in_order(self):
        src = "contract Token is ERC20, Ownable, Pausable {"
        assert extract_inheritance(src) == ["ERC20", "Ownable", "Pausable"]

    def test_constructor_arguments_are_kept(self):
        src = "contract Token is ERC20(name_), Ownable {"
        assert extract_inheritance(src) == ["ERC20(name_)", "Ownable"]

    def test_no_is_clause(self):
        assert extract_inheritance("contract Plain {") == []

    def test_no_declaration(self):
        assert extract_inheritance("") == []


# ── Functions ────────────────────────────────────────────────────────────────


class TestParseParameters:

    def test_empty(self):
        assert parse_parameters("") == []
        assert parse_parameters("   ") == []

    def test_type_and_name(self):
        assert parse_parameters("address to, uint256 amount") == [
            Parameter(name="to", type="address"),
            Parameter(name="amount", type="uint256"),
        ]

    def test_data_location_is_skipped(self):
        assert parse_parameters("bytes calldata data") == [Parameter("data", "bytes")]

    def test_unnamed_parameter_uses_type_for_both(self):
        assert parse_parameters("uint256") == [Parameter("uint256", "uint256")]

    def test_blank_segment(self):
        assert parse_parameters("uint256 a, ")[1] == Parameter("unnamed", "unknown")


class TestExtractModifiers:

    def test_vocabulary_order(self):
        ctx = "external nonReentrant whenNotPaused onlyOwner"
        assert extract_modifiers(ctx) == ["onlyOwner", "whenNotPaused", "nonReentrant"]

    def test_unknown_modifiers_ignored(self):
        assert extract_modifiers("external notBlacklisted(to)") == []


class TestExtractFunctions:

    def test_basic_attributes(self, vault_source):
        funcs = {f.name: f for f in extract_functions(vault_source)}
        assert list(funcs) == ["deposit", "withdraw", "balanceOf"]

        deposit = funcs["deposit"]
        assert deposit.visibility is Visibility.EXTERNAL
        assert deposit.is_payable is True
        assert deposit.state_changing is True
        assert deposit.parameters == []

        view = funcs["balanceOf"]
        assert view.visibility is Visibility.PUBLIC
        assert view.state_changing is False
        assert view.return_type == "(uint256)"
        assert view.parameters == [Parameter("account", "address")]

    def test_default_visibility_is_public(self):
        funcs = extract_functions("contract C {\n function legacy() {}\n}")
        assert funcs[0].visibility is Visibility.PUBLIC

    def test_pure_is_not_state_changing(self):
        funcs = extract_functions("contract C { function f() internal pure returns (uint8) {} }")
        assert funcs[0].state_changing is False
        assert funcs[0].is_payable is False

    def test_modifiers_from_window(self):
        src = "contract C {\n function sweep() external onlyOwner nonReentrant {}\n}"
        assert extract_functions(src)[0].modifiers == ["onlyOwner", "nonReentrant"]

    def test_without_declaration(self):
        assert extract_functions("function orphan() external {}") == []


# ── State variables ──────────────────────────────────────────────────────────


class TestExtractStateVariables:

    def test_declared_variables(self, vault_source):
        variables = {v.name: v for v in extract_state_variables(vault_source)}
        assert list(variables) == ["owner", "balances", "FEE_BPS", "treasury"]

        assert variables["owner"].type == "address"
        assert variables["owner"].visibility is Visibility.PUBLIC
        assert variables["balances"].type == "mapping(address => uint256)"
        assert variables["FEE_BPS"].is_constant is True
        assert variables["treasury"].is_constant is True
        assert variables["treasury"].visibility is Visibility.INTERNAL

    def test_whitespace_in_type_is_normalised(self):
        src = "contract C {\n address   payable  wallet;\n}"
        assert extract_state_variables(src)[0].type == "address payable"

    def test_without_declaration(self):
        assert extract_state_variables("uint256 public x;") == []

    def test_locals_and_loop_counters_skipped(self):
        src = (
            "contract C {\n"
            "    uint256 public total;\n"
            "    function f() external {\n"
            "        for (uint256 i = 0; i < 3; i++) { uint256 x = i; }\n"
            "        bool done = true;\n"
            "    }\n"
            "    address public keeper;\n"
            "}"
        )
        assert [v.name for v in extract_state_variables(src)] == ["total", "keeper"]

    def test_struct_fields_skipped(self):
        src = "contract C {\n struct P { uint256 amount; bool done; }\n uint256 count;\n}"
        assert [v.name for v in extract_state_variables(src)] == ["count"]

    def test_second_contract_body_counts(self):
        src = "contract A {\n uint256 a;\n}\ncontract B {\n uint256 b;\n}"
        assert [v.name for v in extract_state_variables(src)] == ["a", "b"]


# ── Events and external calls ────────────────────────────────────────────────


class TestExtractEvents:

    def test_declaration_order(self, vault_source):
        assert extract_events(vault_source) == ["Deposited", "Withdrawn"]

    def test_duplicates_kept(self):
        src = "contract C {\n event Ping();\n event Ping(uint256 x);\n}"
        assert extract_events(src) == ["Ping", "Ping"]

    def test_without_declaration(self):
        assert extract_events("event Orphan();") == []


class TestExtractExternalCalls:

    def test_unique_first_seen_order(self):
        src = (
            "contract C {\n"
            "  function f() external {\n"
            "    vault.transfer(1);\n"
            '    recipient.call{value: 2}("");\n'
            "    vault.send(3);\n"
            "  }\n"
            "}"
        )
        assert extract_external_calls(src) == ["vault", "recipient"]

    def test_expression_receiver_not_reported(self):
        src = "contract C { function f() external { payable(msg.sender).transfer(1); } }"
        assert extract_external_calls(src) == []

    def test_without_declaration(self):
        assert extract_external_calls('a.call{value: 1}("");') == []
