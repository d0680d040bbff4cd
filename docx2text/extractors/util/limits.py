from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocxParseLimits:
    """
    Tunables for a single DOCX parse.

    The defaults reproduce the behaviour expected by the ingestion pipeline;
    callers only override them for diagnostics or tests. Input size is not
    bounded here, callers gate that before handing over the buffer.
    """

    # Media payloads smaller than this are header-only fragments, not images
    min_image_bytes: int = 50
    # Bytes per base64 window; a multiple of 3 so windows concatenate cleanly
    base64_window: int = 8190
    # Upper bound for a single inflate output chunk
    inflate_chunk_size: int = 64 * 1024
    # How much of the entry listing goes into a "document not found" error
    entry_listing_chars: int = 200

    def __post_init__(self) -> None:
        if self.min_image_bytes < 0:
            raise ValueError(
                f"min_image_bytes must not be negative ({self.min_image_bytes})"
            )
        if self.base64_window <= 0 or self.base64_window % 3:
            raise ValueError(
                f"base64_window must be a positive multiple of 3 ({self.base64_window})"
            )
        if self.inflate_chunk_size <= 0:
            raise ValueError(
                f"inflate_chunk_size must be positive ({self.inflate_chunk_size})"
            )
        if self.entry_listing_chars < 0:
            raise ValueError(
                f"entry_listing_chars must not be negative ({self.entry_listing_chars})"
            )


DEFAULT_DOCX_PARSE_LIMITS = DocxParseLimits()
