"""
OCR service for extracting text from receipt images.

Upstream of the parser: it turns image bytes into raw text and nothing
else. Any OCR failure is reported to callers as empty text.
"""

import io
import logging

import pytesseract
from PIL import Image, ImageEnhance, UnidentifiedImageError

from scanexpense.config import settings

logger = logging.getLogger(__name__)

SUPPORTED_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/bmp")


class OCRService:
    """Service for extracting text from receipt images."""

    def __init__(self):
        """Initialize OCR service with Tesseract configuration."""
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_CMD

    def extract_text_from_image(self, image_data: bytes) -> str:
        """
        Extract text from an image using Tesseract OCR.

        Line breaks are preserved; the parser relies on them.

        Args:
            image_data: Raw image bytes (JPEG, PNG, etc.)

        Returns:
            Extracted text, or "" if the image could not be read
        """
        if not image_data:
            return ""

        try:
            image = Image.open(io.BytesIO(image_data))
            image = self._preprocess_image(image)
            text = pytesseract.image_to_string(image, config=settings.OCR_CONFIG)
        except (UnidentifiedImageError, pytesseract.TesseractError,
                pytesseract.TesseractNotFoundError, OSError):
            logger.warning("Error extracting text from image", exc_info=True)
            return ""

        return text.strip()

    def _preprocess_image(self, image: Image.Image) -> Image.Image:
        """
        Preprocess image to improve OCR accuracy.

        Args:
            image: PIL Image object

        Returns:
            Grayscale, contrast-enhanced image
        """
        if image.mode != 'RGB':
            image = image.convert('RGB')

        image = image.convert('L')

        # Helps with faded thermal paper
        enhancer = ImageEnhance.Contrast(image)
        return enhancer.enhance(2.0)
