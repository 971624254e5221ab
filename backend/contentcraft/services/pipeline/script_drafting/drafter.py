"""
Script Drafter

Drafts the 5-10 second narration for an HCP video with one structured LLM
call. There is no local fallback: any LLM failure or unusable reply raises
ScriptGenerationError and ends the run.
"""

import asyncio
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from contentcraft.core import LLMServiceError, ScriptGenerationError, get_logger
from contentcraft.services.infrastructure.storage import DocumentStore, ResolvedDocument
from contentcraft.services.llm import StructuredLLMService
from ..prompts import (
    SCRIPT_DRAFTING_SYSTEM,
    SCRIPT_DRAFTING_DOCUMENT_RULE,
    SCRIPT_DRAFTING_USER,
    SCRIPT_DRAFT_SCHEMA,
)

logger = get_logger(__name__, component="script_drafter")

DEFAULT_TARGET_AUDIENCE = "Healthcare Professional"

# Normal speaking pace used to reconcile a missing duration estimate
WORDS_PER_SECOND = 2.5


@dataclass(frozen=True)
class ScriptDraft:
    script: str
    estimated_duration_seconds: int
    target_audience: str
    document_used: bool = False


def estimate_duration_from_words(script: str) -> int:
    words = len(script.split())
    return max(1, math.ceil(words / WORDS_PER_SECOND))


def build_user_content(hcp_text: str, prompt: str, document: Optional[ResolvedDocument]) -> str:
    document_section = f"\n\nDocument Content: {document.content}" if document else ""
    return SCRIPT_DRAFTING_USER.format(hcp_text=hcp_text, prompt=prompt, document_section=document_section)


def parse_script_draft(data: Dict[str, Any], document_used: bool = False) -> ScriptDraft:
    """Validate the drafted script reply.

    `script` must be a non-empty string. The model's `duration` is trusted
    when it is a positive finite number, otherwise it is estimated from the word
    count. A blank `targetAudience` becomes the generic audience label.

    Raises:
        ScriptGenerationError: If the script is missing or empty
    """
    script = data.get("script")
    if not isinstance(script, str) or not script.strip():
        raise ScriptGenerationError("Script drafting returned no script text")
    script = script.strip()

    duration = data.get("duration")
    if (
        isinstance(duration, bool)
        or not isinstance(duration, (int, float))
        or not math.isfinite(duration)
        or duration <= 0
    ):
        estimated = estimate_duration_from_words(script)
        logger.info("Duration estimate reconciled from word count", extra={
            "reported_duration": duration,
            "estimated_duration": estimated,
        })
    else:
        estimated = max(1, int(round(duration)))

    audience = data.get("targetAudience")
    if not isinstance(audience, str) or not audience.strip():
        audience = DEFAULT_TARGET_AUDIENCE

    return ScriptDraft(
        script=script,
        estimated_duration_seconds=estimated,
        target_audience=audience.strip(),
        document_used=document_used,
    )


class ScriptDrafter:

    def __init__(self, llm_service: StructuredLLMService, document_store: DocumentStore):
        self.llm_service = llm_service
        self.document_store = document_store

    async def draft(self, hcp_text: str, prompt: str, document_path: Optional[str] = None) -> ScriptDraft:
        """
        Draft narration for one HCP and prompt.

        Args:
            hcp_text: Raw HCP profile text
            prompt: What the video should be about
            document_path: Optional stored reference document

        Raises:
            ScriptGenerationError: LLM failure or malformed reply
        """
        document = None
        if document_path:
            document = await asyncio.to_thread(self.document_store.resolve, document_path)

        system_instruction = SCRIPT_DRAFTING_SYSTEM.format(
            document_rule=SCRIPT_DRAFTING_DOCUMENT_RULE if document else "",
        )

        try:
            data = await self.llm_service.complete_json(
                system_instruction=system_instruction,
                user_content=build_user_content(hcp_text, prompt, document),
                response_schema=SCRIPT_DRAFT_SCHEMA,
                step="script_drafting",
            )
        except LLMServiceError as e:
            logger.error("Script drafting failed", extra={"kind": e.kind.value, "error": str(e)})
            raise ScriptGenerationError("Failed to generate script. Please try again later.") from e

        draft = parse_script_draft(data, document_used=document is not None)
        logger.info("Script drafted", extra={
            "target_audience": draft.target_audience,
            "duration_seconds": draft.estimated_duration_seconds,
            "document_used": draft.document_used,
        })
        return draft
