"""Contract analyzer — hands the extracted structure to the reasoning service.

Pipeline per call:
  1. Render the ``ParsedContract`` into the structural report
  2. Prompt the LLM with source + report
  3. Parse the JSON answer into an ``AnalysisResult``

Every failure leaves this module as one of the ``ReasoningError``
categories (credential, quota, response parsing, generic).
"""

from __future__ import annotations

import logging
import time
from typing import Any

from contractguard.analyzer import ParsedContract, create_contract_summary
from contractguard.core.config import Settings, get_settings
from contractguard.core.errors import ResponseParseError, classify_reasoning_error
from contractguard.core.llm_client import LLMClient
from contractguard.core.types import AnalysisResult, ExploitNarrative, RiskFinding
from contractguard.reasoning.prompts import (
    ANALYSIS_SYSTEM,
    NARRATIVE_SYSTEM,
    QUICK_INSIGHTS_SYSTEM,
    build_analysis_prompt,
    build_narrative_prompt,
    build_quick_insights_prompt,
    truncate_source,
)

logger = logging.getLogger(__name__)


class ContractAnalyzer:
    """Risk analysis of a contract by the LLM, grounded on the parsed structure."""

    def __init__(self, client: LLMClient | None = None, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._client = client or LLMClient(self._settings)

    async def _ask(self, system_prompt: str, user_prompt: str, fast: bool = False) -> dict[str, Any]:
        try:
            return await self._client.analyze(system_prompt, user_prompt, fast=fast)
        except Exception as exc:
            error = classify_reasoning_error(exc)
            logger.error("Reasoning call failed [%s]: %s", error.code.value, exc)
            raise error from exc

    async def analyze_contract(self, source: str, parsed: ParsedContract) -> AnalysisResult:
        """Run the full risk analysis for one contract."""
        start = time.perf_counter()
        summary = create_contract_summary(parsed)
        prompt = build_analysis_prompt(
            truncate_source(source, self._settings.max_source_chars), summary,
        )

        data = await self._ask(ANALYSIS_SYSTEM, prompt)
        try:
            result = AnalysisResult.from_response(data, parsed.name)
        except Exception as exc:
            raise classify_reasoning_error(exc) from exc

        logger.info(
            "Analysis complete: %d findings, risk %s",
            len(result.findings), result.risk_level.value,
            extra={
                "contract_name": parsed.name,
                "duration_ms": round((time.perf_counter() - start) * 1000, 1),
            },
        )
        return result

    async def generate_detailed_narrative(
        self, finding: RiskFinding, contract_name: str,
    ) -> ExploitNarrative:
        """Expand one finding into a stakeholder-friendly exploit narrative."""
        data = await self._ask(NARRATIVE_SYSTEM, build_narrative_prompt(finding, contract_name))
        try:
            return ExploitNarrative.from_response(data)
        except Exception as exc:
            raise classify_reasoning_error(exc) from exc

    async def get_quick_insights(self, source: str) -> list[str]:
        """A handful of observations from the fast model, without full analysis."""
        prompt = build_quick_insights_prompt(
            truncate_source(source, self._settings.max_source_chars),
        )
        data = await self._ask(QUICK_INSIGHTS_SYSTEM, prompt, fast=True)
        insights = data.get("insights") or []
        if not isinstance(insights, list):
            raise ResponseParseError()
        return [str(i) for i in insights]
