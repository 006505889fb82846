from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.datastructures import UploadFile

from ..deps import get_inference_backend
from ...models.document import AnalyzeResponse, ErrorResponse
from ...services.extraction import parse_reply
from ...services.inference_base import InferenceBackend

router = APIRouter(tags=["documents"])

DEFAULT_MEDIA_TYPE = "application/octet-stream"


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    request: Request,
    backend: InferenceBackend = Depends(get_inference_backend),
):
    """
    Analyze an uploaded receipt, invoice or other document.

    Always answers 200 once the model has replied: a reply that cannot be
    parsed as JSON becomes an "other" document with the reply in notes.
    Callers should check for that shape where a receipt was expected.
    """
    # A missing field, or a plain text field named "file", is not an upload
    form = await request.form()
    file = form.get("file")
    if not isinstance(file, UploadFile):
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})

    try:
        content = await file.read()
        media_type = file.content_type or DEFAULT_MEDIA_TYPE
        filename = file.filename or "upload"

        logger.info(
            "Analysis request received",
            filename=filename,
            media_type=media_type,
            size_bytes=len(content),
        )

        raw_text = await backend.analyze(content, media_type, filename)
        data = parse_reply(raw_text)

        return AnalyzeResponse(ok=True, data=data)
    except Exception as e:
        logger.exception(f"Analysis failed: {e}")
        return JSONResponse(status_code=500, content={"error": str(e) or "Server error"})
