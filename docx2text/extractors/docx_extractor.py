"""
DOCX Document Extractor
=======================

Extracts plain text and embedded raster images from Microsoft Word .docx
files (Office Open XML format, Word 2007 and later).

The ZIP container is read directly from its local file headers and the main
document part is scanned as text; neither ``zipfile`` nor an XML parser is
involved, so the extractor works on nothing but the raw bytes of the file.

File Format Background
----------------------
The .docx format is a ZIP archive containing XML files following the Office
Open XML (OOXML) standard. The parts used here:

    word/document.xml: Main document body (paragraphs, tables)
    word/media/: Embedded images

Extraction Steps
----------------
    1. Validate the ZIP local-header signature at offset 0
    2. Walk the local headers and locate word/document.xml
    3. Inflate the main document part
    4. Scan paragraphs (text runs, breaks, tabs) in document order
    5. Convert word/media/* raster images to data URIs

Steps 1 to 3 are fatal when they fail. Image problems and an empty document
only produce warnings on the result.

Known Limitations
-----------------
- Legacy .doc and password-protected files are rejected, not parsed
- XML entities in text runs are kept verbatim unless decode_entities is set
- Images are returned in archive order, not in document order
- Headers, footers, footnotes and comments are not extracted
- Memory use is not bounded; callers cap the input size

Usage
-----
    >>> import io
    >>> from docx2text.extractors.docx_extractor import read_docx
    >>>
    >>> with open("document.docx", "rb") as f:
    ...     for doc in read_docx(io.BytesIO(f.read()), path="document.docx"):
    ...         print(f"Paragraphs: {len(doc.paragraphs)}")
    ...         print(doc.text[:500])
"""

import io
import logging
from typing import Any, Generator

from docx2text.exceptions import (
    ExtractionDecompressionError,
    ExtractionInvalidArchiveError,
)
from docx2text.extractors.data_types import DocxParseResult, ZipEntry
from docx2text.extractors.util.container import describe_non_zip
from docx2text.extractors.util.image_utils import extract_images
from docx2text.extractors.util.inflate import decompress_entry
from docx2text.extractors.util.limits import (
    DEFAULT_DOCX_PARSE_LIMITS,
    DocxParseLimits,
)
from docx2text.extractors.util.ooxml_text import extract_paragraphs
from docx2text.extractors.util.zip_reader import (
    has_local_header_signature,
    parse_zip_entries,
)

logger = logging.getLogger(__name__)

DOCUMENT_PART = "word/document.xml"

PARAGRAPH_SEPARATOR = "\n\n"

NO_TEXT_WARNING = f"No text content found in {DOCUMENT_PART}"


def _validate_signature(data: memoryview) -> None:
    if has_local_header_signature(data):
        return
    reason = describe_non_zip(data)
    message = "Invalid DOCX: not a valid ZIP archive"
    if reason:
        message += f" ({reason})"
    raise ExtractionInvalidArchiveError(message)


def _find_document_entry(
    entries: list[ZipEntry], limits: DocxParseLimits
) -> ZipEntry:
    if not entries:
        raise ExtractionInvalidArchiveError(
            "Invalid DOCX: ZIP archive contains no entries"
        )

    for entry in entries:
        if entry.normalized_filename == DOCUMENT_PART:
            return entry

    # List available entries for diagnostics
    names = ", ".join(entry.filename for entry in entries)
    raise ExtractionInvalidArchiveError(
        f"Invalid DOCX: {DOCUMENT_PART} not found. "
        f"Entries: {names[: limits.entry_listing_chars]}"
    )


def _read_document_xml(entry: ZipEntry, limits: DocxParseLimits) -> str:
    try:
        raw = decompress_entry(entry, limits.inflate_chunk_size)
    except ExtractionDecompressionError as e:
        raise ExtractionDecompressionError(
            f"Failed to decompress {DOCUMENT_PART}: {e}", cause=e
        ) from e
    # utf-8-sig drops a leading byte order mark
    return raw.decode("utf-8-sig", errors="replace")


def parse_docx(
    data: bytes | bytearray | memoryview,
    *,
    limits: DocxParseLimits = DEFAULT_DOCX_PARSE_LIMITS,
    decode_entities: bool = False,
) -> DocxParseResult:
    """
    Parse a .docx file from its raw bytes.

    Pure function: the same buffer always produces an equal result and no
    state is kept between calls.

    Args:
        data: The complete .docx file.
        limits: Image size floor, base64 window, inflate chunk size and the
            length of the entry listing in "not found" errors.
        decode_entities: Decode XML entities in text runs. Off by default,
            so text is returned exactly as stored.

    Returns:
        DocxParseResult with the paragraphs, their joined text, the images as
        data URIs and any warnings.

    Raises:
        ExtractionInvalidArchiveError: Not a ZIP, an empty ZIP, or no
            word/document.xml part.
        ExtractionDecompressionError: word/document.xml cannot be inflated.
    """
    view = memoryview(data)
    if view.format != "B":
        view = view.cast("B")
    warnings: list[str] = []

    _validate_signature(view)

    entries = parse_zip_entries(view)
    document_entry = _find_document_entry(entries, limits)
    logger.debug(
        f"Found {DOCUMENT_PART} (method {document_entry.compression_method}, "
        f"{len(document_entry.compressed_data)} bytes)"
    )

    document_xml = _read_document_xml(document_entry, limits)

    paragraphs = extract_paragraphs(document_xml, decode_entities=decode_entities)
    if not paragraphs:
        warnings.append(NO_TEXT_WARNING)

    images, failed = extract_images(entries, limits)
    for filename in failed:
        warnings.append(f"Failed to extract image: {filename}")

    logger.info(
        "Extracted DOCX: %d paragraphs, %d images, %d warnings",
        len(paragraphs),
        len(images),
        len(warnings),
    )

    return DocxParseResult(
        text=PARAGRAPH_SEPARATOR.join(paragraphs),
        paragraphs=tuple(paragraphs),
        images=tuple(images),
        warnings=tuple(warnings),
    )


def read_docx(
    file_like: io.BytesIO,
    path: str | None = None,
    *,
    limits: DocxParseLimits = DEFAULT_DOCX_PARSE_LIMITS,
    decode_entities: bool = False,
) -> Generator[DocxParseResult, Any, None]:
    """
    Extract text and images from a Word .docx file.

    Uses a generator for consistency with the file-based entry points, even
    though a .docx holds exactly one document.

    Args:
        file_like: BytesIO object containing the complete DOCX file data.
            The stream position is reset to the beginning before reading.
        path: Optional path of the source file, only used for logging.
        limits: Passed through to parse_docx.
        decode_entities: Passed through to parse_docx.

    Yields:
        A single DocxParseResult.
    """
    logger.debug(f"Reading DOCX file [{path}]" if path else "Reading DOCX file")
    file_like.seek(0)
    yield parse_docx(file_like.read(), limits=limits, decode_entities=decode_entities)
