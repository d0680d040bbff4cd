"""
Embedded Image Utilities
========================

Turns the raster images stored under ``word/media/`` into data URIs.

The MIME type is derived from the file extension only. Vector formats
(EMF/WMF) and unknown extensions are skipped without a warning, as are media
entries packed with a compression method other than Store or Deflate, and
payloads too small to be a real image.
"""

import base64
import logging
from typing import Iterable, Optional

from docx2text.exceptions import (
    ExtractionDecompressionError,
    ExtractionUnsupportedCompressionError,
)
from docx2text.extractors.data_types import ZipEntry
from docx2text.extractors.util.inflate import decompress_entry
from docx2text.extractors.util.limits import (
    DEFAULT_DOCX_PARSE_LIMITS,
    DocxParseLimits,
)

logger = logging.getLogger(__name__)

# Media parts use one separator style throughout, never a mix
MEDIA_PREFIXES = ("word/media/", "word\\media\\")

# =============================================================================
# Extension to MIME type mapping for supported raster formats
# =============================================================================
IMAGE_CONTENT_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "webp": "image/webp",
}


def is_media_entry(entry: ZipEntry) -> bool:
    return entry.filename.startswith(MEDIA_PREFIXES)


def content_type_from_filename(filename: str) -> Optional[str]:
    """
    Resolve the MIME type of a media part from its extension.

    Returns:
        The content type, or None for vector formats (emf, wmf) and anything
        not in IMAGE_CONTENT_TYPES.
    """
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return None
    ext = name.rsplit(".", 1)[-1].lower()
    return IMAGE_CONTENT_TYPES.get(ext)


def encode_base64(
    data: bytes, window: int = DEFAULT_DOCX_PARSE_LIMITS.base64_window
) -> str:
    """
    Base64-encode ``data`` window by window.

    ``window`` must be a multiple of 3, otherwise the per-window padding would
    end up in the middle of the payload.
    """
    if window <= 0 or window % 3:
        raise ValueError(f"window must be a positive multiple of 3 ({window})")
    view = memoryview(data)
    parts = [
        base64.b64encode(view[start : start + window]).decode("ascii")
        for start in range(0, len(view), window)
    ]
    return "".join(parts)


def to_data_uri(
    content_type: str,
    data: bytes,
    window: int = DEFAULT_DOCX_PARSE_LIMITS.base64_window,
) -> str:
    return f"data:{content_type};base64,{encode_base64(data, window)}"


def extract_images(
    entries: Iterable[ZipEntry],
    limits: DocxParseLimits = DEFAULT_DOCX_PARSE_LIMITS,
) -> tuple[list[str], list[str]]:
    """
    Extract the supported raster images of a Word package as data URIs.

    Never raises for a single bad entry. Entries whose DEFLATE stream cannot be
    inflated are reported back by filename so the caller can turn them into
    warnings.

    Args:
        entries: All entries of the archive, in scan order.
        limits: Size floor, base64 window and inflate chunk size.

    Returns:
        Tuple of (data URIs in entry scan order, filenames that failed).
    """
    logger.debug("Extracting images")
    images: list[str] = []
    failed: list[str] = []

    for entry in entries:
        if not is_media_entry(entry):
            continue

        content_type = content_type_from_filename(entry.filename)
        if content_type is None:
            logger.debug(f"Skipping unsupported media format: {entry.filename}")
            continue

        try:
            raw = decompress_entry(entry, limits.inflate_chunk_size)
        except ExtractionUnsupportedCompressionError as e:
            logger.debug(f"Skipping media entry {entry.filename} - {e}")
            continue
        except ExtractionDecompressionError as e:
            logger.debug(f"Image extraction failed for {entry.filename} - {e}")
            failed.append(entry.filename)
            continue

        if len(raw) < limits.min_image_bytes:
            logger.debug(
                f"Skipping media entry {entry.filename}: only {len(raw)} bytes"
            )
            continue

        images.append(to_data_uri(content_type, raw, limits.base64_window))

    return images, failed
