"""
Compliance Evaluator

Scores a narration script against the compliance rubric.

Primary path is a structured LLM review. When the LLM call fails or its
verdict is unusable, a local vocabulary heuristic decides instead; the
heuristic can produce Passed or Review but never Failed, and the result
carries a soft-failure marker.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from contentcraft.core import LLMServiceError, ProviderErrorKind, get_logger
from contentcraft.models.status import ComplianceStatus
from contentcraft.services.llm import StructuredLLMService
from ..contracts import ProviderSoftFailure
from ..prompts import COMPLIANCE_REVIEW_SYSTEM, COMPLIANCE_REVIEW_USER, COMPLIANCE_VERDICT_SCHEMA
from .vocabulary import has_evidence_language, heuristic_compliance_check

logger = get_logger(__name__, component="compliance_evaluator")

REVIEW_SCORE_THRESHOLD = 60

FALLBACK_PASS_SCORE = 80
FALLBACK_REVIEW_SCORE = 50
FALLBACK_ISSUE = "Compliance check error - limited validation performed"
FALLBACK_RECOMMENDATION = "Include explicit evidence-based language"


@dataclass
class ComplianceResult:
    status: ComplianceStatus
    score: int
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    evaluator: str = "llm"  # "llm" or "heuristic"
    soft_failure: Optional[ProviderSoftFailure] = None

    @property
    def passed(self) -> bool:
        return self.status == ComplianceStatus.PASSED

    def details(self) -> Dict[str, Any]:
        """Verdict as stored on the video record"""
        return {
            "passed": self.passed,
            "score": self.score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "evaluator": self.evaluator,
            "approved_manually": False,
        }


@dataclass(frozen=True)
class Verdict:
    passed: bool
    score: int
    issues: List[str]
    recommendations: List[str]


def _string_list(value: Any, name: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{name}' must be a list of strings")
    return value


def parse_verdict(data: Dict[str, Any]) -> Verdict:
    """Validate the LLM verdict shape.

    Raises:
        ValueError: If `passed` or `score` is missing or has the wrong type,
            or the issue lists are not lists of strings
    """
    passed = data.get("passed")
    if not isinstance(passed, bool):
        raise ValueError("'passed' must be a boolean")

    score = data.get("score")
    # bool is an int subclass; reject it explicitly
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValueError("'score' must be a number")

    return Verdict(
        passed=passed,
        score=int(round(max(0.0, min(100.0, float(score))))),
        issues=_string_list(data.get("issues"), "issues"),
        recommendations=_string_list(data.get("recommendations"), "recommendations"),
    )


def status_from_verdict(verdict: Verdict, script: str) -> ComplianceStatus:
    """Map a verdict to a status, applying the evidence-language rescue.

    Evidence language lifts Failed to Review; it never produces Passed.
    """
    if verdict.passed:
        return ComplianceStatus.PASSED
    if verdict.score >= REVIEW_SCORE_THRESHOLD:
        return ComplianceStatus.REVIEW
    if has_evidence_language(script):
        return ComplianceStatus.REVIEW
    return ComplianceStatus.FAILED


def fallback_result(script: str, soft_failure: Optional[ProviderSoftFailure] = None) -> ComplianceResult:
    """Heuristic verdict used when the LLM review is unavailable"""
    if heuristic_compliance_check(script):
        return ComplianceResult(
            status=ComplianceStatus.PASSED,
            score=FALLBACK_PASS_SCORE,
            evaluator="heuristic",
            soft_failure=soft_failure,
        )
    return ComplianceResult(
        status=ComplianceStatus.REVIEW,
        score=FALLBACK_REVIEW_SCORE,
        issues=[FALLBACK_ISSUE],
        recommendations=[FALLBACK_RECOMMENDATION],
        evaluator="heuristic",
        soft_failure=soft_failure,
    )


class ComplianceEvaluator:
    """Scores narration scripts. Never raises for provider failures."""

    COMPONENT = "compliance"

    def __init__(self, llm_service: StructuredLLMService):
        self.llm_service = llm_service

    async def evaluate(self, script: str) -> ComplianceResult:
        try:
            data = await self.llm_service.complete_json(
                system_instruction=COMPLIANCE_REVIEW_SYSTEM.format(),
                user_content=COMPLIANCE_REVIEW_USER.format(script=script),
                response_schema=COMPLIANCE_VERDICT_SCHEMA,
                step="compliance_review",
            )
            verdict = parse_verdict(data)
        except LLMServiceError as e:
            return self._fallback(script, ProviderSoftFailure.from_error(self.COMPONENT, e))
        except ValueError as e:
            failure = ProviderSoftFailure(
                component=self.COMPONENT,
                kind=ProviderErrorKind.RESPONSE,
                message=f"Malformed compliance verdict: {e}",
            )
            return self._fallback(script, failure)

        status = status_from_verdict(verdict, script)
        logger.info("Compliance evaluated", extra={
            "compliance_status": status.value,
            "score": verdict.score,
            "issue_count": len(verdict.issues),
        })
        return ComplianceResult(
            status=status,
            score=verdict.score,
            issues=verdict.issues,
            recommendations=verdict.recommendations,
        )

    def _fallback(self, script: str, failure: ProviderSoftFailure) -> ComplianceResult:
        result = fallback_result(script, failure)
        logger.warning("Compliance review fell back to heuristic", extra={
            "kind": failure.kind.value,
            "error": failure.message,
            "compliance_status": result.status.value,
        })
        return result
