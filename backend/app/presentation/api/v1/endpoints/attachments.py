"""Product attachment endpoints — metadata, download, upload and removal."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import FileResponse

from app.application.schemas import AttachmentResponse
from app.application.services import AttachmentService
from app.application.services.attachment_service import read_limited
from app.domain.exceptions import EntityNotFoundError, InvalidAttachmentError
from app.infrastructure.dependencies import get_attachment_service, require_admin

router = APIRouter(tags=["Attachments"])


@router.get("/attachments/{attachment_id}", response_model=AttachmentResponse)
async def get_attachment(
    attachment_id: str,
    service: AttachmentService = Depends(get_attachment_service),
) -> AttachmentResponse:
    """Attachment metadata; Markdown attachments include their text."""
    try:
        attachment = await service.get_attachment(attachment_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AttachmentResponse.model_validate(attachment, from_attributes=True)


@router.get("/attachments/{attachment_id}/download")
async def download_attachment(
    attachment_id: str,
    service: AttachmentService = Depends(get_attachment_service),
) -> FileResponse:
    try:
        attachment = await service.get_attachment(attachment_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    path = service.file_path(attachment)
    if path is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return FileResponse(
        path,
        media_type=attachment.mime_type,
        filename=attachment.original_name,
        content_disposition_type="attachment",
    )


@router.post(
    "/admin/products/{product_id}/attachments",
    response_model=AttachmentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def upload_attachment(
    product_id: str,
    file: UploadFile = File(...),
    service: AttachmentService = Depends(get_attachment_service),
) -> AttachmentResponse:
    """Attach a PDF or Markdown file to a product."""
    content = await read_limited(file, service.max_upload_bytes)
    try:
        attachment = await service.upload_attachment(
            product_id=product_id,
            filename=file.filename or "upload",
            mime_type=file.content_type,
            content=content,
        )
    except InvalidAttachmentError as e:
        code = (
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE if e.too_large
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=e.message)
    return AttachmentResponse.model_validate(attachment, from_attributes=True)


@router.delete(
    "/admin/attachments/{attachment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_attachment(
    attachment_id: str,
    service: AttachmentService = Depends(get_attachment_service),
) -> None:
    await service.delete_attachment(attachment_id)
