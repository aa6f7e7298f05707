"""
Scan API router: receipt image or text in, prefilled expense form out.
"""

from fastapi import APIRouter, HTTPException, UploadFile, File
from fastapi.concurrency import run_in_threadpool
from dataclasses import asdict
from typing import Optional
import logging

from scanexpense.config import settings
from scanexpense.models.draft import Draft
from scanexpense.models.receipt import ScanResponse, ScanTextRequest
from scanexpense.services.handoff import to_draft_response, to_form_defaults
from scanexpense.services.ocr import OCRService, SUPPORTED_IMAGE_TYPES
from scanexpense.services.parser import ReceiptParser

router = APIRouter(prefix="/scan", tags=["scan"])
logger = logging.getLogger(__name__)

parser = ReceiptParser()

NO_TEXT_MESSAGE = "Could not process image"


def _build_response(draft: Draft, text_found: bool, currency: Optional[str] = None) -> ScanResponse:
    return ScanResponse(
        draft=to_draft_response(draft),
        form=to_form_defaults(draft, currency=currency),
        text_found=text_found,
        message=None if text_found else NO_TEXT_MESSAGE,
    )


@router.post("", response_model=ScanResponse)
async def scan_receipt(
    file: UploadFile = File(...),
    currency: Optional[str] = None
):
    """
    Scan a receipt image and return a draft for the expense form.

    This endpoint:
    1. Accepts an image upload (JPG, PNG, GIF, BMP)
    2. Runs OCR
    3. Extracts a draft from the text
    4. Returns the draft and the form's initial values

    OCR failure is not an HTTP error: the draft is empty and the response
    says the image could not be processed.

    Args:
        file: Uploaded receipt image
        currency: Optional currency to preselect on the form

    Returns:
        Draft and form defaults
    """
    if file.content_type not in SUPPORTED_IMAGE_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type: {file.content_type}. Allowed: JPG, PNG, GIF, BMP"
        )

    image_data = await file.read()
    file_size_mb = len(image_data) / (1024 * 1024)

    if file_size_mb > settings.MAX_UPLOAD_MB:
        raise HTTPException(
            status_code=400,
            detail=f"File too large: {file_size_mb:.2f}MB. Maximum: {settings.MAX_UPLOAD_MB}MB"
        )

    ocr = OCRService()
    text = await run_in_threadpool(ocr.extract_text_from_image, image_data)

    draft = parser.run(text)

    logger.info("Receipt scanned", extra={
        "filename": file.filename,
        "text_length": len(text),
        "date_found": draft.date is not None,
        "total_found": draft.total is not None,
    })

    return _build_response(draft, text_found=bool(text), currency=currency)


@router.post("/text", response_model=ScanResponse)
async def scan_text(
    request: ScanTextRequest,
    currency: Optional[str] = None,
    debug: bool = False
):
    """
    Extract a draft from text that was already recognized.

    Args:
        request: Raw receipt text
        currency: Optional currency to preselect on the form
        debug: Include every pattern match per field

    Returns:
        Draft and form defaults
    """
    draft = parser.run(request.text)
    response = _build_response(draft, text_found=bool(request.text.strip()), currency=currency)

    if debug:
        response.candidates = {
            field_name: [asdict(c) for c in parser.find_candidates(request.text, field_name)]
            for field_name in parser.field_patterns
        }

    return response
