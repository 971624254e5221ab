"""
Upload use case - store an HCP profile for later generation runs.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from contentcraft.config import DEFAULT_USER_ID
from contentcraft.core import ValidationError
from contentcraft.services.infrastructure.storage import DocumentStore, Upload, UploadRepository
from .base import UseCase


@dataclass
class UploadCommand:
    hcp_text: str
    document_path: Optional[str] = None
    user_id: Optional[str] = None


class UploadUseCase(UseCase[UploadCommand, Upload]):

    def __init__(self, upload_repository: UploadRepository, document_store: DocumentStore):
        self.upload_repository = upload_repository
        self.document_store = document_store

    async def execute(self, request: UploadCommand) -> Upload:
        """
        Raises:
            ValidationError: HCP text is blank, or the document reference
                does not resolve inside the document store
        """
        hcp_text = (request.hcp_text or "").strip()
        if not hcp_text:
            raise ValidationError("HCP information is required", field="hcp_text")

        document_path = (request.document_path or "").strip() or None
        if document_path and await asyncio.to_thread(self.document_store.resolve, document_path) is None:
            raise ValidationError("Document not found or not supported", field="document_path")

        return await asyncio.to_thread(
            self.upload_repository.create,
            hcp_text,
            request.user_id or DEFAULT_USER_ID,
            document_path,
        )
