"""
Fixed compliance vocabularies and the local heuristic check.

Matching is case-insensitive substring matching, so "RCT" in any casing
counts, and so does "cure" inside "secure". The lists are intentionally
blunt: they back up the LLM review, they do not replace it.
"""

from typing import List

EVIDENCE_MARKERS = [
    "evidence-based",
    "clinical trial",
    "study shows",
    "research indicates",
    "data suggest",
    "demonstrated efficacy",
    "proven",
    "clinically validated",
    "statistically significant",
    "peer-reviewed",
    "meta-analysis",
    "randomized controlled trial",
    "rct",
]

BANNED_MARKETING_TERMS = [
    "best in class",
    "superior to",
    "better than",
    "most effective",
    "guaranteed",
    "miracle",
    "cure",
    "no side effects",
    "risk free",
    "immediate results",
    "complete relief",
    "revolutionary",
    "breakthrough",
]


def _find_terms(script: str, terms: List[str]) -> List[str]:
    lowered = (script or "").lower()
    return [term for term in terms if term in lowered]


def find_evidence_markers(script: str) -> List[str]:
    return _find_terms(script, EVIDENCE_MARKERS)


def find_banned_terms(script: str) -> List[str]:
    return _find_terms(script, BANNED_MARKETING_TERMS)


def has_evidence_language(script: str) -> bool:
    return bool(find_evidence_markers(script))


def heuristic_compliance_check(script: str) -> bool:
    """Local pass/fail: at least one evidence marker and no banned term"""
    return has_evidence_language(script) and not find_banned_terms(script)
