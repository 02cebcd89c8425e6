"""ContractGuard CLI — structural extraction and risk analysis of contracts.

Usage:
    contractguard parse <path>           Extract structure and print the report
    contractguard parse --example <key>  Same, for a bundled sample contract
    contractguard analyze <path>         Extraction + LLM risk analysis
    contractguard examples               List bundled sample contracts
    contractguard config                 Show current configuration

Examples:
    contractguard parse ./contracts/Vault.sol
    contractguard parse ./contracts/ --format json -o vault.json
    contractguard analyze --example vulnerable_vault --format json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from contractguard import __version__
from contractguard.analyzer import create_contract_summary, parse_contract
from contractguard.analyzer.samples import EXAMPLE_CONTRACTS
from contractguard.core.config import get_settings
from contractguard.core.errors import ReasoningError
from contractguard.core.logging import setup_logging
from contractguard.core.types import AnalysisResult


# ── Coloured output helpers ──────────────────────────────────────────────────

_RESET = "\033[0m"
_BOLD = "\033[1m"
_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"

_SEV_COLOR = {
    "CRITICAL": _RED,
    "HIGH": "\033[38;5;208m",  # orange
    "MEDIUM": _YELLOW,
    "LOW": _CYAN,
}


def _c(text: str, code: str) -> str:
    return f"{code}{text}{_RESET}"


# ── Banner ───────────────────────────────────────────────────────────────────

BANNER = f"""
{_BOLD}{_CYAN}ContractGuard{_RESET}
  {_DIM}Smart contract structure & risk analysis — v{__version__}{_RESET}
"""


# ── CLI argument parser ─────────────────────────────────────────────────────


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", nargs="?", help="Path to .sol file or directory")
    p.add_argument(
        "--example",
        "-e",
        choices=sorted(EXAMPLE_CONTRACTS),
        help="Use a bundled sample contract instead of a path",
    )
    p.add_argument(
        "--format",
        "-f",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    p.add_argument("--output", "-o", help="Write output to file instead of stdout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contractguard",
        description="ContractGuard — smart contract structure & risk analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument("--no-banner", action="store_true", help="Suppress the startup banner")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    parser.add_argument("--log-level", default=None, help="Override configured log level")

    sub = parser.add_subparsers(dest="command")

    # ── parse ────────────────────────────────────────────────────────────────
    parse_p = sub.add_parser("parse", help="Extract contract structure")
    _add_source_args(parse_p)

    # ── analyze ──────────────────────────────────────────────────────────────
    analyze_p = sub.add_parser("analyze", help="Extract structure and run LLM risk analysis")
    _add_source_args(analyze_p)
    analyze_p.add_argument(
        "--severity",
        choices=["critical", "high", "medium", "low"],
        help="Minimum severity to show",
    )

    # ── examples / config ────────────────────────────────────────────────────
    sub.add_parser("examples", help="List bundled sample contracts")
    sub.add_parser("config", help="Show current configuration")

    return parser


# ── Source loading ───────────────────────────────────────────────────────────


def _load_source(args: argparse.Namespace) -> str | None:
    """Read the contract text named by ``args``; print an error and return None if impossible."""
    if args.example:
        return EXAMPLE_CONTRACTS[args.example].code

    if not args.path:
        print(_c("Error: provide a path or --example to analyze.", _RED), file=sys.stderr)
        return None

    path = Path(args.path).resolve()
    if not path.exists():
        print(_c(f"Error: path '{path}' does not exist.", _RED), file=sys.stderr)
        return None

    if path.is_file():
        return path.read_text(encoding="utf-8", errors="replace")

    sol_files = sorted(path.rglob("*.sol"))
    if not sol_files:
        print(_c(f"Error: no .sol files found in '{path}'.", _RED), file=sys.stderr)
        return None

    return "\n\n".join(
        f"// File: {sf.relative_to(path)}\n{sf.read_text(encoding='utf-8', errors='replace')}"
        for sf in sol_files
    )


def _emit(output: str, args: argparse.Namespace) -> None:
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        if not args.quiet:
            print(f"  Written to {_c(args.output, _CYAN)}")
    else:
        print(output)


# ── Parse command ────────────────────────────────────────────────────────────


def _run_parse(args: argparse.Namespace) -> int:
    source = _load_source(args)
    if source is None:
        return 1

    parsed = parse_contract(source)
    if args.format == "json":
        output = json.dumps(parsed.to_dict(), indent=2)
    else:
        output = create_contract_summary(parsed)
    _emit(output, args)
    return 0


# ── Analyze command ──────────────────────────────────────────────────────────

_SEV_ORDER = ["CRITICAL", "HIGH", "MEDIUM", "LOW"]


def _sev_index(sev: str) -> int:
    try:
        return _SEV_ORDER.index(sev.upper())
    except ValueError:
        return 99


def _filter_findings(result: AnalysisResult, min_severity: str | None) -> list:
    findings = list(result.findings)
    if min_severity:
        cutoff = _sev_index(min_severity)
        findings = [f for f in findings if _sev_index(f.severity.value) <= cutoff]

    # Sort by severity (critical first)
    findings.sort(key=lambda f: _sev_index(f.severity.value))
    return findings


def _print_table(findings: list, result: AnalysisResult, quiet: bool = False) -> None:
    """Pretty-print findings as a coloured table."""
    if not quiet:
        level = result.risk_level.value
        print(f"\n{_BOLD}Analysis complete{_RESET} — {result.contract_name}")
        print(
            f"  Risk score: {_c(f'{result.overall_score:.1f}/10', _SEV_COLOR.get(level, ''))}"
            f"  |  Level: {level}\n"
        )
        print(f"  {result.summary}\n")

    if not findings:
        print(_c("  ✓ No findings at the requested severity level.", _GREEN))
        return

    for i, f in enumerate(findings, 1):
        sev_col = _SEV_COLOR.get(f.severity.value, "")
        badge = _c(f" {f.severity.value} ", sev_col + _BOLD)
        title = _c(f.title, _BOLD)
        print(f"  {_DIM}{i:>3}.{_RESET} {badge} {title}  {_DIM}{f.category.value}{_RESET}")

        if f.description and not quiet:
            desc = f.description[:200]
            if len(f.description) > 200:
                desc += "…"
            print(f"       {_DIM}{desc}{_RESET}")
        if f.mitigation and not quiet:
            print(f"       {_DIM}Fix: {f.mitigation[:200]}{_RESET}")
        print()


async def _run_analyze(args: argparse.Namespace) -> int:
    """Execute an analysis and print results."""
    from contractguard.reasoning.analyzer import ContractAnalyzer

    source = _load_source(args)
    if source is None:
        return 1

    parsed = parse_contract(source)
    if not args.quiet:
        print(f"  Analyzing {_c(parsed.name, _CYAN)}…", file=sys.stderr)

    try:
        result = await ContractAnalyzer().analyze_contract(source, parsed)
    except ReasoningError as exc:
        print(_c(f"\nAnalysis failed [{exc.code.value}]: {exc.message}", _RED), file=sys.stderr)
        return 2

    findings = _filter_findings(result, args.severity)
    if args.format == "json":
        _emit(result.model_dump_json(indent=2), args)
    else:
        _print_table(findings, result, quiet=args.quiet)

    # Exit code: 1 if any critical/high findings survive the filter
    filtered = result.model_copy(update={"findings": findings})
    return 1 if filtered.has_high_risk else 0


# ── Examples / config commands ───────────────────────────────────────────────


def _run_examples() -> int:
    print(f"\n{_BOLD}Bundled sample contracts{_RESET}\n")
    for key in sorted(EXAMPLE_CONTRACTS):
        sample = EXAMPLE_CONTRACTS[key]
        print(f"  {_c(key, _CYAN)}  {sample.name} — {_DIM}{sample.description}{_RESET}")
    print()
    return 0


def _run_config() -> int:
    """Print current settings (redacted)."""
    s = get_settings()
    print(f"\n{_BOLD}ContractGuard Configuration{_RESET}\n")
    for field_name in sorted(type(s).model_fields.keys()):
        val = getattr(s, field_name, "")
        # Redact secrets
        if any(kw in field_name for kw in ("password", "secret", "key", "token")):
            val = "****" if val else "(not set)"
        print(f"  {_DIM}{field_name}:{_RESET}  {val}")
    print()
    return 0


# ── Entrypoint ───────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"contractguard {__version__}")
        return 0

    settings = get_settings()
    setup_logging(settings.app_env, args.log_level or settings.log_level)

    if not args.no_banner and not args.quiet:
        print(BANNER, file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        return _run_config()

    if args.command == "examples":
        return _run_examples()

    if args.command == "parse":
        return _run_parse(args)

    if args.command == "analyze":
        return asyncio.run(_run_analyze(args))

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
