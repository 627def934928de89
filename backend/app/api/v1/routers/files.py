# app/api/v1/routers/files.py
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from app.api.v1.deps import get_current_claims, get_intake
from app.schemas.error import ErrorOut
from app.schemas.file import FileOut
from app.services import FileIntake

router = APIRouter(prefix="/files", tags=["files"])

@router.post(
    "/upload",
    response_model=FileOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_claims)],
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}, 403: {"model": ErrorOut}},
)
async def upload_file(
    request: Request,
    file: UploadFile | None = File(default=None),
    description: str | None = Form(default=None),
    intake: FileIntake = Depends(get_intake),
):
    """
    Upload a single file (multipart field "file", at most 10 MiB by default).

    The MIME type is recorded as sent by the client. The returned url points
    at /uploads/<stored filename> on the host that received the request.

    Raises:
        ValidationFailed (400): No file part, or file too large
    """
    record = await intake.accept(file, str(request.base_url), description=description)
    return FileOut.from_file(record)
