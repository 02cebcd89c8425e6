"""Shared fixtures for the ContractGuard test suite."""

from __future__ import annotations

import logging
import os

import pytest

from contractguard.analyzer import ParsedContract, parse_contract
from contractguard.analyzer.samples import EXAMPLE_CONTRACTS
from contractguard.core.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep tests independent of the developer's CONTRACTGUARD_* environment."""
    for key in list(os.environ):
        if key.upper().startswith("CONTRACTGUARD_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """``setup_logging`` replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ── Contract sources ─────────────────────────────────────────────────────────

VAULT_SOURCE = """\
pragma solidity ^0.8.20;

contract Vault {
    address public owner;
    mapping(address => uint256) public balances;
    uint256 public constant FEE_BPS = 30;
    address immutable treasury;

    event Deposited(address indexed user, uint256 amount);
    event Withdrawn(address indexed user, uint256 amount);

    function deposit() external payable {
        balances[msg.sender] += msg.value;
        emit Deposited(msg.sender, msg.value);
    }

    function withdraw() external {
        selfdestruct(payable(owner));
    }

    function balanceOf(address account) public view returns (uint256) {
        return balances[account];
    }
}
"""

ROLE_SOURCE = """\
contract Treasury is AccessControl {
    bytes32 public constant ADMIN_ROLE = keccak256("ADMIN_ROLE");
    bytes32 public constant MINTER_ROLE = keccak256("MINTER_ROLE");

    constructor() {
        grantRole(ADMIN_ROLE, msg.sender);
    }

    function mint(address to, uint256 amount) external {
        require(hasRole(MINTER_ROLE, msg.sender), "not minter");
    }
}
"""


@pytest.fixture
def vault_source() -> str:
    return VAULT_SOURCE


@pytest.fixture
def role_source() -> str:
    return ROLE_SOURCE


@pytest.fixture
def parsed_vault() -> ParsedContract:
    return parse_contract(VAULT_SOURCE)


@pytest.fixture
def sample_sources() -> dict[str, str]:
    return {key: sample.code for key, sample in EXAMPLE_CONTRACTS.items()}
