"""
Upload repository - data access for submitted HCP profiles.

Classes:
    UploadRepository: Abstract interface
    FileBasedUploadRepository: One JSON document per upload under DATA_DIR/uploads
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from contentcraft.config import DATA_DIR
from contentcraft.core import get_logger
from .json_store import JsonRecordStore
from .records import Upload

logger = get_logger(__name__, component="upload_repository")


class UploadRepository(ABC):
    """Abstract repository for uploads. Uploads are never updated or auto-deleted."""

    @abstractmethod
    def create(self, hcp_text: str, user_id: str, document_path: Optional[str] = None) -> Upload:
        """Persist a new upload and return it"""
        pass

    @abstractmethod
    def get(self, upload_id: str) -> Optional[Upload]:
        """Retrieve an upload by ID, or None"""
        pass


class FileBasedUploadRepository(UploadRepository):

    def __init__(self, storage_dir: Optional[Path] = None):
        self._store = JsonRecordStore(storage_dir or DATA_DIR / "uploads")

    def create(self, hcp_text: str, user_id: str, document_path: Optional[str] = None) -> Upload:
        upload = Upload(hcp_text=hcp_text, user_id=user_id, document_path=document_path)
        self._store.save(upload.id, upload.to_dict())
        logger.info("Upload created", extra={
            "upload_id": upload.id,
            "user_id": user_id,
            "has_document": bool(document_path),
        })
        return upload

    def get(self, upload_id: str) -> Optional[Upload]:
        data = self._store.load(upload_id)
        return Upload.from_dict(data) if data else None
