"""
Storage - file-backed repositories and the document store
"""

from .records import Upload, Video, new_record_id
from .json_store import JsonRecordStore
from .upload_repository import UploadRepository, FileBasedUploadRepository
from .video_repository import VideoRepository, FileBasedVideoRepository
from .document_store import DocumentStore, ResolvedDocument, document_marker

__all__ = [
    "Upload",
    "Video",
    "new_record_id",
    "JsonRecordStore",
    "UploadRepository",
    "FileBasedUploadRepository",
    "VideoRepository",
    "FileBasedVideoRepository",
    "DocumentStore",
    "ResolvedDocument",
    "document_marker",
]
