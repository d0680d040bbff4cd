"""
Minimal ZIP local-header reader.

Walks the local file headers of a ZIP container front to back and returns one
``ZipEntry`` per header, without consulting the central directory. This is all
an OOXML package needs: Word writes every part with a local header and real
sizes, and the central directory that follows the last entry is where the walk
naturally stops.

Local file header layout (little-endian, 30 bytes fixed):

    offset  size  field
    0       4     signature  PK\\x03\\x04
    4       2     version needed to extract
    6       2     general purpose bit flag
    8       2     compression method
    10      2     last mod time
    12      2     last mod date
    14      4     crc-32
    18      4     compressed size
    22      4     uncompressed size
    26      2     file name length
    28      2     extra field length

Not supported:
- Zip64 sizes (entries over 4 GiB)
- Entries whose sizes only live in a trailing data descriptor
- Encrypted entries
"""

import logging
import struct

from docx2text.extractors.data_types import ZipEntry

logger = logging.getLogger(__name__)

__all__ = [
    "DATA_DESCRIPTOR_SIGNATURE",
    "LOCAL_HEADER_SIGNATURE",
    "has_local_header_signature",
    "parse_zip_entries",
]

LOCAL_HEADER_SIGNATURE = b"PK\x03\x04"
DATA_DESCRIPTOR_SIGNATURE = b"PK\x07\x08"

_LOCAL_HEADER = struct.Struct("<4sHHHHHIIIHH")
LOCAL_HEADER_SIZE = _LOCAL_HEADER.size  # 30

# signature + crc32 + compressed size + uncompressed size
DATA_DESCRIPTOR_SIZE = 16


def has_local_header_signature(data, offset: int = 0) -> bool:
    """Check whether a local file header signature starts at ``offset``."""
    return bytes(data[offset : offset + 4]) == LOCAL_HEADER_SIGNATURE


def parse_zip_entries(data: bytes | bytearray | memoryview) -> list[ZipEntry]:
    """
    Parse all local-file entries of a ZIP buffer in archive order.

    Scanning stops silently at the first position that does not hold a local
    file header, or when fewer than 30 bytes are left. Entry data is returned
    as views into ``data``; truncated entries get a short view instead of an
    error.

    Args:
        data: The complete archive.

    Returns:
        The entries found, possibly none. Deciding whether an empty result is
        an error is left to the caller.
    """
    view = memoryview(data)
    if view.format != "B":
        view = view.cast("B")
    size = len(view)
    entries: list[ZipEntry] = []
    offset = 0

    while offset + LOCAL_HEADER_SIZE <= size:
        (
            signature,
            _version,
            _flags,
            method,
            _mtime,
            _mdate,
            _crc,
            compressed_size,
            uncompressed_size,
            filename_len,
            extra_len,
        ) = _LOCAL_HEADER.unpack_from(view, offset)

        if signature != LOCAL_HEADER_SIGNATURE:
            logger.debug(f"No local header at offset {offset}, stopping scan")
            break

        filename_start = offset + LOCAL_HEADER_SIZE
        filename = bytes(view[filename_start : filename_start + filename_len]).decode(
            "utf-8", errors="replace"
        )

        data_start = filename_start + filename_len + extra_len
        entries.append(
            ZipEntry(
                filename=filename,
                compression_method=method,
                compressed_data=view[data_start : data_start + compressed_size],
                uncompressed_size=uncompressed_size,
            )
        )

        offset = data_start + compressed_size

        # The data descriptor is optional and its signature is optional too;
        # only the signed form can be detected reliably.
        if bytes(view[offset : offset + 4]) == DATA_DESCRIPTOR_SIGNATURE:
            offset += DATA_DESCRIPTOR_SIZE

    logger.debug(f"Found {len(entries)} ZIP entries")
    return entries
