"""
Upload routes - store HCP profiles
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..core import ValidationError, get_logger
from ..dependencies import get_upload_use_case
from ..models import UploadRequest, UploadResponse
from ..services.use_cases import UploadCommand, UploadUseCase
from .responses import upload_response

router = APIRouter(tags=["uploads"])
logger = get_logger(__name__, component="uploads_route")


@router.post("/uploads", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def create_upload(
    request: UploadRequest,
    use_case: UploadUseCase = Depends(get_upload_use_case),
):
    """Store an HCP profile, optionally with a reference document already in the document store"""
    try:
        upload = await use_case.execute(UploadCommand(
            hcp_text=request.hcp_text,
            document_path=request.document_path,
            user_id=request.user_id,
        ))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return upload_response(upload)
