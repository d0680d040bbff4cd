import logging
import zlib

from docx2text.exceptions import (
    ExtractionDecompressionError,
    ExtractionUnsupportedCompressionError,
)
from docx2text.extractors.data_types import (
    COMPRESSION_DEFLATED,
    COMPRESSION_STORED,
    ZipEntry,
)
from docx2text.extractors.util.limits import DEFAULT_DOCX_PARSE_LIMITS

logger = logging.getLogger(__name__)


def _inflate_raw(data: memoryview, chunk_size: int) -> bytes:
    """Inflate a raw DEFLATE stream (no zlib or gzip envelope)."""
    inflater = zlib.decompressobj(-zlib.MAX_WBITS)
    chunks: list[bytes] = []
    pending = data
    try:
        while pending:
            chunk = inflater.decompress(pending, chunk_size)
            if chunk:
                chunks.append(chunk)
            pending = inflater.unconsumed_tail
            if inflater.eof:
                break
        chunks.append(inflater.flush())
    except zlib.error as e:
        raise ExtractionDecompressionError(
            f"DEFLATE decompression failed: {e}", cause=e
        ) from e

    if not inflater.eof:
        raise ExtractionDecompressionError(
            "DEFLATE stream ended before its final block"
        )
    if inflater.unused_data:
        logger.debug(
            f"Ignoring {len(inflater.unused_data)} bytes after end of DEFLATE stream"
        )
    return b"".join(chunks)


def decompress_entry(
    entry: ZipEntry, chunk_size: int = DEFAULT_DOCX_PARSE_LIMITS.inflate_chunk_size
) -> bytes:
    """
    Return the uncompressed content of a ZIP entry.

    Stored entries are returned as-is; deflated entries are inflated in
    bounded chunks, so the declared uncompressed size is never trusted.

    Raises:
        ExtractionUnsupportedCompressionError: Method is neither Store nor Deflate.
        ExtractionDecompressionError: The DEFLATE stream is corrupt or truncated.
    """
    if entry.compression_method == COMPRESSION_STORED:
        return bytes(entry.compressed_data)
    if entry.compression_method == COMPRESSION_DEFLATED:
        return _inflate_raw(entry.compressed_data, chunk_size)
    raise ExtractionUnsupportedCompressionError(
        entry.compression_method, entry.filename
    )
