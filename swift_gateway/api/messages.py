"""
MT799 Message API Endpoints

Upload, preview and list SWIFT MT799 free-format messages.

Uploads are parsed in full (marker validation, block segmentation, field
extraction) before anything is written; a rejected message never reaches
the store.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ..config import settings
from ..mt799 import FormatError, Mt799Error, parse
from .schemas import (
    BlockSpans,
    ErrorDetail,
    MessageResponse,
    ParseResponse,
    UploadResponse,
)
from .store import MessageStore, get_message_store

router = APIRouter(prefix="/api/message", tags=["MT799 Messages"])
logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

async def _read_upload(file: Optional[UploadFile]) -> str:
    """Read the whole upload as text; reject empty or missing files."""
    if file is None:
        logger.warning("No file uploaded.")
        raise HTTPException(status_code=400, detail="No file uploaded.")

    body = await file.read()
    if not body:
        logger.warning("No file uploaded.")
        raise HTTPException(status_code=400, detail="No file uploaded.")

    try:
        content = body.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning(f"Upload {file.filename} is not valid UTF-8")
        raise HTTPException(status_code=400, detail="Uploaded file is not valid UTF-8 text.")

    logger.info(f"File content read successfully ({len(body)} bytes).")
    return content


def _rejection(exc: Mt799Error) -> HTTPException:
    code = exc.reason.value if isinstance(exc, FormatError) else type(exc).__name__
    detail = ErrorDetail(
        code=code,
        message=exc.message,
        block=exc.block.value if exc.block else None,
    )
    return HTTPException(status_code=400, detail=detail.model_dump())


def _parse(raw: str):
    try:
        return parse(raw, settings.validation_policy, settings.segmentation_policy)
    except Mt799Error as e:
        logger.warning(f"Rejected message: {e.message}")
        raise _rejection(e)
    except Exception as e:
        logger.error(f"Error parsing message: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


# =============================================================================
# POST /api/message/upload
# =============================================================================

@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload an MT799 message",
    description="""
    Parses an uploaded MT799 file and stores the extracted fields.

    **Blocks:**
    - `{1:}` Basic Header (25 fixed-width characters)
    - `{2:}` Application Header (38+ fixed-width characters)
    - `{4:}` Text Block (:20:, :21:, :79: fields)
    - `{5:}` Trailer ({MAC:}, {CHK:})

    Returns 400 if the file is empty, the block markers are missing or out
    of order, or a block does not fit its layout.
    """
)
async def upload_message(
    file: Optional[UploadFile] = File(None),
    store: MessageStore = Depends(get_message_store),
) -> UploadResponse:
    raw = await _read_upload(file)
    result = _parse(raw)

    try:
        stored = await store.store(result.record)
    except Exception as e:
        logger.error(f"Error saving message: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info("Message saved successfully.")
    return UploadResponse(message="Message saved successfully.", messageId=stored.message_id)


# =============================================================================
# POST /api/message/parse
# =============================================================================

@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse an MT799 message without storing it",
    description="""
    Runs the same pipeline as `/upload` and returns the extracted record,
    the raw block spans and the text block tag order. Nothing is persisted.
    """
)
async def parse_message_preview(
    file: Optional[UploadFile] = File(None),
) -> ParseResponse:
    raw = await _read_upload(file)
    result = _parse(raw)

    return ParseResponse(
        record=MessageResponse.from_record(result.record),
        blocks=BlockSpans.from_blocks(result.blocks),
        textTags=result.text.tags(),
    )


# =============================================================================
# GET /api/message/messages
# =============================================================================

@router.get(
    "/messages",
    response_model=list[MessageResponse],
    summary="List stored MT799 messages",
    description="Returns every stored message in insertion order. 404 when the store is empty."
)
async def get_all_messages(
    store: MessageStore = Depends(get_message_store),
) -> list[MessageResponse]:
    try:
        records = await store.load_all()
    except Exception as e:
        logger.error(f"Error retrieving messages: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    if not records:
        logger.info("No messages found.")
        raise HTTPException(status_code=404, detail="No messages found.")

    logger.info(f"Returning {len(records)} messages.")
    return [MessageResponse.from_record(record) for record in records]
