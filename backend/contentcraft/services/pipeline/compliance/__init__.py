"""
Compliance review of narration scripts
"""

from .vocabulary import (
    EVIDENCE_MARKERS,
    BANNED_MARKETING_TERMS,
    find_evidence_markers,
    find_banned_terms,
    has_evidence_language,
    heuristic_compliance_check,
)
from .evaluator import (
    ComplianceEvaluator,
    ComplianceResult,
    Verdict,
    parse_verdict,
    status_from_verdict,
    fallback_result,
    FALLBACK_ISSUE,
    FALLBACK_RECOMMENDATION,
)

__all__ = [
    "EVIDENCE_MARKERS",
    "BANNED_MARKETING_TERMS",
    "find_evidence_markers",
    "find_banned_terms",
    "has_evidence_language",
    "heuristic_compliance_check",
    "ComplianceEvaluator",
    "ComplianceResult",
    "Verdict",
    "parse_verdict",
    "status_from_verdict",
    "fallback_result",
    "FALLBACK_ISSUE",
    "FALLBACK_RECOMMENDATION",
]
