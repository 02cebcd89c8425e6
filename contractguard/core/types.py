"""Result schema returned by the downstream reasoning service."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator


# ── Enums ────────────────────────────────────────────────────────────────────


class RiskSeverity(str, enum.Enum):
    """Severity of a single finding or of the contract overall."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class RiskCategory(str, enum.Enum):
    """High-level grouping of a finding."""

    ACCESS_CONTROL = "access-control"
    FUND_SECURITY = "fund-security"
    LOGIC = "logic"
    EXTERNAL_CALLS = "external-calls"
    UPGRADEABILITY = "upgradeability"


class Probability(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _coerce_enum(value: Any, enum_cls: type[enum.Enum], default: enum.Enum) -> enum.Enum:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if member.value.lower() == value.strip().lower():
                return member
    return default


# ── Schemas ──────────────────────────────────────────────────────────────────


class RiskFinding(BaseModel):
    """One risk identified by the reasoning service."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str = ""
    severity: RiskSeverity = RiskSeverity.LOW
    category: RiskCategory = RiskCategory.LOGIC
    description: str = ""
    affected_code: str | None = None
    exploit_scenario: str = ""
    impact: str = ""
    mitigation: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _ensure_id(cls, v: Any) -> str:
        return str(v) if v else str(uuid.uuid4())

    @field_validator("severity", mode="before")
    @classmethod
    def _severity(cls, v: Any) -> RiskSeverity:
        return _coerce_enum(v, RiskSeverity, RiskSeverity.LOW)

    @field_validator("category", mode="before")
    @classmethod
    def _category(cls, v: Any) -> RiskCategory:
        return _coerce_enum(v, RiskCategory, RiskCategory.LOGIC)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "RiskFinding":
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            severity=data.get("severity"),
            category=data.get("category"),
            description=data.get("description") or "",
            affected_code=data.get("affectedCode"),
            exploit_scenario=data.get("exploitScenario") or "",
            impact=data.get("impact") or "",
            mitigation=data.get("mitigation") or "",
        )


class ExploitNarrative(BaseModel):
    """Story-form walkthrough of how a finding could be exploited."""

    title: str = ""
    attacker_profile: str = ""
    steps: list[str] = Field(default_factory=list)
    outcome: str = ""
    estimated_impact: str = ""
    probability: Probability = Probability.LOW

    @field_validator("probability", mode="before")
    @classmethod
    def _probability(cls, v: Any) -> Probability:
        return _coerce_enum(v, Probability, Probability.LOW)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "ExploitNarrative":
        return cls(
            title=data.get("title") or "",
            attacker_profile=data.get("attackerProfile") or "",
            steps=[str(s) for s in data.get("steps") or []],
            outcome=data.get("outcome") or "",
            estimated_impact=data.get("estimatedImpact") or "",
            probability=data.get("probability"),
        )


class AnalysisResult(BaseModel):
    """Complete risk analysis of one contract."""

    contract_name: str
    overall_score: float = Field(default=0.0, ge=0.0, le=10.0)
    risk_level: RiskSeverity = RiskSeverity.LOW
    summary: str = "Analysis complete."
    findings: list[RiskFinding] = Field(default_factory=list)
    exploit_narratives: list[ExploitNarrative] = Field(default_factory=list)
    positive_aspects: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("overall_score", mode="before")
    @classmethod
    def _clamp_score(cls, v: Any) -> float:
        try:
            score = float(v or 0)
        except (TypeError, ValueError):
            return 0.0
        return max(0.0, min(10.0, score))

    @field_validator("risk_level", mode="before")
    @classmethod
    def _risk_level(cls, v: Any) -> RiskSeverity:
        return _coerce_enum(v, RiskSeverity, RiskSeverity.LOW)

    @classmethod
    def from_response(cls, data: dict[str, Any], contract_name: str) -> "AnalysisResult":
        """Build a result from the service's camelCase JSON, filling defaults."""
        return cls(
            contract_name=contract_name,
            overall_score=data.get("overallScore"),
            risk_level=data.get("riskLevel"),
            summary=data.get("summary") or "Analysis complete.",
            findings=[
                RiskFinding.from_response(f)
                for f in data.get("findings") or []
                if isinstance(f, dict)
            ],
            exploit_narratives=[
                ExploitNarrative.from_response(n)
                for n in data.get("exploitNarratives") or []
                if isinstance(n, dict)
            ],
            positive_aspects=[str(p) for p in data.get("positiveAspects") or []],
            recommendations=[str(r) for r in data.get("recommendations") or []],
        )

    @property
    def has_high_risk(self) -> bool:
        return any(
            f.severity in (RiskSeverity.HIGH, RiskSeverity.CRITICAL)
            for f in self.findings
        )
