"""Prompt templates for the downstream reasoning service."""

from __future__ import annotations

from contractguard.core.types import RiskFinding

_TRUNCATION_MARKER = "\n// ... truncated for analysis ..."

ANALYSIS_SYSTEM = """\
You are ContractGuard, an expert smart contract security analyst. Your role \
is to identify potential risks, explain them clearly to both technical and \
non-technical audiences, and help developers understand what could go wrong. \
Always answer with a single JSON object."""

_ANALYSIS_TASK = """\
## YOUR TASK
Analyze this smart contract and identify potential security risks. For each risk:
1. Explain what the vulnerability is
2. Describe a realistic exploit scenario (from an attacker's perspective)
3. Explain the potential impact in plain language
4. Suggest mitigations

Focus on these risk categories:
- **Access Control**: Who can call critical functions? Can owners abuse their power?
- **Fund Security**: How are funds handled? Can they be drained or locked?
- **Logic Errors**: Are there calculation issues, reentrancy vectors, or state inconsistencies?
- **External Calls**: Are there unsafe external interactions?
- **Upgradeability**: Can the contract behavior be changed maliciously?

## OUTPUT FORMAT (JSON)
{
  "overallScore": <number 0-10, where 10 is highest risk>,
  "riskLevel": "<LOW|MEDIUM|HIGH|CRITICAL>",
  "summary": "<2-3 sentence executive summary of the contract's risk profile>",
  "findings": [
    {
      "id": "<unique-id>",
      "title": "<short descriptive title>",
      "severity": "<LOW|MEDIUM|HIGH|CRITICAL>",
      "category": "<access-control|fund-security|logic|external-calls|upgradeability>",
      "description": "<technical description of the issue>",
      "affectedCode": "<relevant code snippet if applicable>",
      "exploitScenario": "<step-by-step attack scenario from attacker perspective>",
      "impact": "<plain language explanation of what happens if exploited>",
      "mitigation": "<recommended fix or best practice>"
    }
  ],
  "exploitNarratives": [
    {
      "title": "<attack name>",
      "attackerProfile": "<who might attempt this: competitor, insider, opportunist, etc>",
      "steps": ["<step 1>", "<step 2>"],
      "outcome": "<what the attacker gains>",
      "estimatedImpact": "<financial or operational impact estimate>",
      "probability": "<Low|Medium|High>"
    }
  ],
  "positiveAspects": ["<good security practices observed>"],
  "recommendations": ["<high-level recommendations for the development team>"]
}

Be thorough but realistic. Don't invent issues that aren't there, but don't \
miss real risks either. Explain technical concepts in accessible terms."""

NARRATIVE_SYSTEM = """\
You are a security researcher explaining a vulnerability to stakeholders. \
Always answer with a single JSON object."""

QUICK_INSIGHTS_SYSTEM = """\
You are a smart contract security analyst giving a fast first impression. \
Always answer with a single JSON object."""


def truncate_source(source: str, max_chars: int) -> str:
    """Cap very large sources to stay within the model's context window."""
    if max_chars <= 0 or len(source) <= max_chars:
        return source
    return source[:max_chars] + _TRUNCATION_MARKER


def build_analysis_prompt(source: str, summary: str) -> str:
    """Source text plus the structural report, followed by task and schema."""
    return (
        f"## SOURCE CODE\n```solidity\n{source}\n```\n\n"
        f"## PARSED CONTRACT STRUCTURE\n{summary}\n\n"
        f"{_ANALYSIS_TASK}"
    )


def build_narrative_prompt(finding: RiskFinding, contract_name: str) -> str:
    return f"""\
## Vulnerability
- Contract: {contract_name}
- Issue: {finding.title}
- Severity: {finding.severity.value}
- Description: {finding.description}

## Task
Create a detailed, realistic exploit narrative that explains:
1. Who might attempt this attack (attacker profile)
2. Step-by-step how they would execute it
3. What they would gain
4. The estimated impact

Make it accessible to non-technical stakeholders while remaining accurate.

## Output Format (JSON)
{{
  "title": "<attack name>",
  "attackerProfile": "<who: nation-state, competitor, insider, opportunist, automated bot>",
  "steps": ["<detailed step 1>", "<step 2>"],
  "outcome": "<what attacker achieves>",
  "estimatedImpact": "<financial/operational impact>",
  "probability": "<Low|Medium|High>"
}}"""


def build_quick_insights_prompt(source: str) -> str:
    return (
        "Quickly scan this smart contract and provide 3-5 key observations "
        "about its security profile:\n\n"
        f"```solidity\n{source}\n```\n\n"
        'Return as JSON: { "insights": ["<insight 1>", "<insight 2>"] }'
    )
