"""Recognition patterns shared by every scanner.

All patterns are lexical: they run over raw source text, not a token stream.
They cannot see through comments, string literals or nested braces, so a
declaration inside a comment is reported like real code and a guard named in
a neighbouring function can be attributed to the wrong one. This is the price
of tolerating partial and unparseable input; a real grammar belongs in a
separate component producing the same ``ParsedContract``.

Each entry documents the construct it targets, the groups it yields and its
known false-positive / false-negative modes.
"""

from __future__ import annotations

import re

# ── Declarations ─────────────────────────────────────────────────────────────

# Contract declaration: ``[abstract] contract Name [is A, B(arg)] {``.
# Groups: 1 = name, 2 = raw inheritance clause (or None).
# FN: interfaces and libraries are not contracts. FP: a commented-out
# declaration still matches.
CONTRACT_DECL_RE = re.compile(
    r"\b(?:abstract\s+)?contract\s+(\w+)(?:\s+is\s+([^{]+?))?\s*\{",
)

# Function declaration up to the optional ``returns (...)`` clause.
# Groups: 1 = name, 2 = raw parameter list, 3 = visibility, 4 = mutability
# (view|pure|payable), 5 = returns clause.
# FN: visibility and mutability are only read in that order and directly
# after the parameter list, so ``view public`` or ``override view`` lose the
# mutability keyword; nested parentheses in parameters end the list early.
FUNCTION_DECL_RE = re.compile(
    r"\bfunction\s+(\w+)\s*\(([^)]*)\)\s*"
    r"(public|external|internal|private)?\s*"
    r"(view|pure|payable)?\s*"
    r"(returns\s*\([^)]*\))?",
)

# Characters inspected around a function match when looking for guards.
# Wide enough for a typical modifier list; in densely packed code the window
# can reach into the neighbouring function.
MODIFIER_WINDOW_BEFORE = 100
MODIFIER_WINDOW_AFTER = 200

# Guard modifiers recognised by plain substring presence in the window.
GUARD_MODIFIERS: tuple[str, ...] = (
    "onlyOwner",
    "onlyAdmin",
    "onlyRole",
    "whenNotPaused",
    "whenPaused",
    "nonReentrant",
    "initializer",
    "authorized",
)

# State variable of a primitive, fixed-size bytes, array or mapping type
# (one level of nested mapping) with optional visibility and
# constant/immutable keyword, terminated by ``;`` or ``=``.
# Groups: 1 = type, 2 = visibility, 3 = mutability keyword, 4 = name.
# FP: function-local declarations look identical; the scanner keeps only
# matches at brace depth 1, which braces inside strings or comments can skew.
# FN: struct, enum, contract and interface typed variables; keywords in
# non-canonical order (``constant public``).
STATE_VAR_RE = re.compile(
    r"\b("
    r"(?:address(?:\s+payable)?|uint\d*|int\d*|bool|string|bytes\d*)(?:\s*\[\d*\])*"
    r"|mapping\s*\((?:[^()]|\([^()]*\))*\)"
    r")"
    r"(?:\s+(public|private|internal))?"
    r"(?:\s+(constant|immutable))?"
    r"\s+(\w+)(?=\s*[;=])",
)

# Event declaration. Group 1 = event name.
# FP: the word ``event`` followed by an identifier inside comments.
EVENT_DECL_RE = re.compile(r"\bevent\s+(\w+)")

# ── External interaction idioms ──────────────────────────────────────────────

# ``x.call{value: ...}``, ``x.transfer(``, ``x.send(``.
# Groups 1/2/3 = receiver identifier for call/transfer/send respectively.
# FP: ERC-20 ``token.transfer(to, amount)`` is indistinguishable from a
# value transfer. FN: receivers that are expressions, e.g.
# ``payable(msg.sender).transfer(``, and bare ``x.call(data)``.
EXTERNAL_CALL_RE = re.compile(
    r"(\w+)\.call\{|(\w+)\.transfer\(|(\w+)\.send\(",
)

# ── Access control idioms (case-insensitive) ─────────────────────────────────

MULTISIG_RE = re.compile(r"multisig|gnosis", re.IGNORECASE)
ROLE_BASED_RE = re.compile(r"AccessControl|hasRole|grantRole", re.IGNORECASE)
# ``Ownable`` base or an ``owner()`` / ``onlyOwner()`` style call.
OWNER_RE = re.compile(r"Ownable|owner\s*\(\)", re.IGNORECASE)
RENOUNCE_OWNERSHIP_RE = re.compile(r"renounceOwnership", re.IGNORECASE)
TRANSFER_OWNERSHIP_RE = re.compile(r"transferOwnership", re.IGNORECASE)
RENOUNCE_ROLE_RE = re.compile(r"renounceRole", re.IGNORECASE)

# Role identifier on a ``bytes32`` line, e.g.
# ``bytes32 public constant MINTER_ROLE = keccak256("MINTER_ROLE");``.
# Group 1 = role identifier. FP: ``bytes32`` parameters on a line that also
# mentions a role, e.g. ``onlyRole(DEFAULT_ADMIN_ROLE)``.
ROLE_DECL_RE = re.compile(r"bytes32\b.*?\b(\w+_ROLE)\b")

# ── Risk keywords (case-insensitive) ─────────────────────────────────────────

SELFDESTRUCT_RE = re.compile(r"selfdestruct|suicide", re.IGNORECASE)
DELEGATECALL_RE = re.compile(r"delegatecall", re.IGNORECASE)
ASSEMBLY_RE = re.compile(r"assembly\s*\{", re.IGNORECASE)

# Any of these anywhere in the text flags upgradeability. Deliberately broad:
# ``initialize`` also matches unrelated identifiers such as ``initializeFees``.
UPGRADE_KEYWORDS: tuple[str, ...] = (
    "Upgradeable",
    "UUPSUpgradeable",
    "TransparentProxy",
    "BeaconProxy",
    "initialize",
    "initializer",
    "_disableInitializers",
)
UPGRADE_RE = re.compile(
    "|".join(re.escape(k) for k in UPGRADE_KEYWORDS), re.IGNORECASE,
)
