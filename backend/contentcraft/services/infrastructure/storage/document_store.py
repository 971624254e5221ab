"""
Document store - resolves stored reference documents for script drafting.

Only plain-text documents are read. PDF and Word documents are acknowledged
with a marker line instead of being extracted; binary extraction is out of
scope for this service, so the model only learns that a document exists.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from contentcraft.config import (
    UPLOAD_DIR,
    PLAIN_TEXT_DOCUMENT_EXTENSIONS,
    MARKER_ONLY_DOCUMENT_EXTENSIONS,
    MAX_DOCUMENT_CHARS,
)
from contentcraft.core import get_logger, validate_path_within_directory

logger = get_logger(__name__, component="document_store")

# Public URL prefix under which stored documents are referenced
UPLOADS_URL_PREFIX = "/uploads/"


@dataclass
class ResolvedDocument:
    name: str
    content: str
    extracted: bool  # False when content is only the received-document marker


def document_marker(name: str) -> str:
    return f"[Document received: {name}]"


class DocumentStore:
    """Resolves document references inside a single base directory"""

    def __init__(self, base_dir: Optional[Path] = None, max_chars: int = MAX_DOCUMENT_CHARS):
        self.base_dir = Path(base_dir or UPLOAD_DIR)
        self.max_chars = max_chars

    def _to_path(self, document_path: str) -> Path:
        relative = document_path
        if relative.startswith(UPLOADS_URL_PREFIX):
            relative = relative[len(UPLOADS_URL_PREFIX):]
        candidate = Path(relative)
        if candidate.is_absolute():
            return candidate
        return self.base_dir / candidate

    def resolve(self, document_path: Optional[str]) -> Optional[ResolvedDocument]:
        """
        Resolve a stored document reference.

        Returns None (and logs why) when there is no reference, the path
        escapes the base directory, the file is missing, or the format is
        not supported.
        """
        if not document_path or not document_path.strip():
            return None

        path = self._to_path(document_path.strip())
        if not validate_path_within_directory(path, self.base_dir):
            logger.warning("Document path rejected", extra={"document_path": document_path})
            return None

        if not path.is_file():
            logger.warning("Document not found", extra={"document_path": document_path})
            return None

        extension = path.suffix.lower()
        if extension in PLAIN_TEXT_DOCUMENT_EXTENSIONS:
            try:
                content = path.read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                logger.warning("Document unreadable", extra={"document_path": document_path, "error": str(e)})
                return None
            return ResolvedDocument(name=path.name, content=content[:self.max_chars], extracted=True)

        if extension in MARKER_ONLY_DOCUMENT_EXTENSIONS:
            return ResolvedDocument(name=path.name, content=document_marker(path.name), extracted=False)

        logger.info("Unsupported document format ignored", extra={
            "document_path": document_path,
            "extension": extension,
        })
        return None
