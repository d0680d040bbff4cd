"""
docx2text: Text and image extraction for Word .docx files.

Decodes the ZIP container and the main document part of Office Open XML Word
documents directly from their bytes, returning the paragraphs as plain text
and the embedded raster images as data URIs.
"""

import io
import logging
import mimetypes
from pathlib import Path
from typing import Any, Generator

from docx2text.exceptions import (
    ExtractionDecompressionError,
    ExtractionError,
    ExtractionFileFormatNotSupportedError,
    ExtractionInvalidArchiveError,
    ExtractionUnsupportedCompressionError,
)
from docx2text.extractors.data_types import DocxParseResult
from docx2text.extractors.docx_extractor import parse_docx, read_docx
from docx2text.extractors.util.limits import (
    DEFAULT_DOCX_PARSE_LIMITS,
    DocxParseLimits,
)
from docx2text.mime_types import SUPPORTED_EXTENSIONS, is_supported_mime_type

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def is_supported_file(path: str | Path) -> bool:
    """Checks if the path is a Word OOXML document"""
    path = str(path).lower()
    mime_type, _ = mimetypes.guess_type(path)
    return is_supported_mime_type(mime_type) or path.endswith(SUPPORTED_EXTENSIONS)


def read_file(
    path: str | Path,
    *,
    limits: DocxParseLimits = DEFAULT_DOCX_PARSE_LIMITS,
    decode_entities: bool = False,
) -> Generator[DocxParseResult, Any, None]:
    """
    Read and extract content from a .docx file on disk.

    Args:
        path: Path to the file to read.
        limits: Parsing limits, see DocxParseLimits.
        decode_entities: Decode XML entities in text runs.

    Yields:
        A single DocxParseResult.

    Raises:
        ExtractionFileFormatNotSupportedError: The path is not a .docx/.docm file.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> import docx2text
        >>> for result in docx2text.read_file("document.docx"):
        ...     print(result.get_full_text())
    """
    path = Path(path)
    if not is_supported_file(path):
        logger.debug(f"File [{path}] is not supported")
        raise ExtractionFileFormatNotSupportedError(str(path))
    with open(path, "rb") as f:
        yield from read_docx(
            io.BytesIO(f.read()),
            str(path),
            limits=limits,
            decode_entities=decode_entities,
        )


__all__ = [
    # Version
    "__version__",
    # Main functions
    "parse_docx",
    "read_docx",
    "read_file",
    "is_supported_file",
    # Result and settings
    "DocxParseResult",
    "DocxParseLimits",
    "DEFAULT_DOCX_PARSE_LIMITS",
    # Errors
    "ExtractionError",
    "ExtractionInvalidArchiveError",
    "ExtractionDecompressionError",
    "ExtractionUnsupportedCompressionError",
    "ExtractionFileFormatNotSupportedError",
]
