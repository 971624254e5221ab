"""
Prompt Registry

Prompts and response schemas for the two LLM-backed pipeline steps.

Structure:
- SCRIPT_DRAFTING: narration drafting for an HCP
- COMPLIANCE_REVIEW: rubric scoring of a narration
"""

from dataclasses import dataclass


@dataclass
class PromptTemplate:
    """A prompt template with placeholders"""
    template: str
    description: str = ""

    def format(self, **kwargs) -> str:
        return self.template.format(**kwargs)


# =============================================================================
# SCRIPT DRAFTING
# =============================================================================

SCRIPT_DRAFTING_SYSTEM = PromptTemplate(
    template="""You write short narration scripts for avatar videos aimed at healthcare professionals (HCPs).

Rules:
- The narration must take 5 to 10 seconds to read aloud at a normal pace.
- Use evidence-based language and keep claims compliant with pharmaceutical marketing regulations.
- Personalise the message using the HCP information.
{document_rule}
Return JSON:
{{
  "script": "the narration text",
  "duration": estimated narration length in seconds (number),
  "targetAudience": "the HCP type addressed, e.g. Cardiologist"
}}""",
    description="System instruction for narration drafting"
)

SCRIPT_DRAFTING_DOCUMENT_RULE = "- Draw specific details from the reference document content when it is provided.\n"

SCRIPT_DRAFTING_USER = PromptTemplate(
    template="HCP Information: {hcp_text}\n\nPrompt: {prompt}{document_section}",
    description="Per-request content for narration drafting"
)

SCRIPT_DRAFT_SCHEMA = {
    "type": "object",
    "description": "Narration script for an HCP avatar video",
    "properties": {
        "script": {
            "type": "string",
            "description": "The complete narration text"
        },
        "duration": {
            "type": "number",
            "description": "Estimated narration length in seconds"
        },
        "targetAudience": {
            "type": "string",
            "description": "HCP type the narration addresses"
        }
    },
    "required": ["script", "duration", "targetAudience"]
}


# =============================================================================
# COMPLIANCE REVIEW
# =============================================================================

COMPLIANCE_REVIEW_SYSTEM = PromptTemplate(
    template="""You review pharmaceutical marketing narration for regulatory (PMDA) compliance.

A compliant script:
1. Makes only evidence-based claims
2. Avoids exaggerated efficacy claims
3. Mentions safety information where appropriate
4. Uses correct medical terminology
5. Avoids misleading comparisons

Return JSON:
{{
  "passed": true or false,
  "score": compliance score from 0 to 100,
  "issues": ["each compliance problem found"],
  "recommendations": ["each suggested improvement"]
}}""",
    description="System instruction for compliance scoring"
)

COMPLIANCE_REVIEW_USER = PromptTemplate(
    template="Evaluate this script for compliance:\n\n{script}",
    description="Per-request content for compliance scoring"
)

COMPLIANCE_VERDICT_SCHEMA = {
    "type": "object",
    "description": "Compliance verdict for a narration script",
    "properties": {
        "passed": {"type": "boolean"},
        "score": {"type": "number", "description": "0-100"},
        "issues": {"type": "array", "items": {"type": "string"}},
        "recommendations": {"type": "array", "items": {"type": "string"}}
    },
    "required": ["passed", "score", "issues", "recommendations"]
}
