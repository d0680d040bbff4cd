import typing
from dataclasses import dataclass, field

# ZIP compression methods understood by the entry inflater
COMPRESSION_STORED = 0
COMPRESSION_DEFLATED = 8


@dataclass(frozen=True)
class ZipEntry:
    """
    One local-file entry of a ZIP container.

    ``compressed_data`` is a view into the buffer handed to the reader and is
    only valid while that buffer is alive. ``uncompressed_size`` is the value
    declared in the local header; it is informational only.
    """

    filename: str
    compression_method: int
    compressed_data: memoryview
    uncompressed_size: int = 0

    @property
    def normalized_filename(self) -> str:
        return self.filename.replace("\\", "/")


@dataclass(frozen=True)
class DocxParseResult:
    # Paragraphs joined with a blank line
    text: str = ""
    paragraphs: tuple[str, ...] = field(default_factory=tuple)
    # data:<mime>;base64,<payload> in archive order
    images: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def iterator(self) -> typing.Iterator[str]:
        yield from self.paragraphs

    def get_full_text(self) -> str:
        return self.text

    def to_dict(self, include_images: bool = True) -> dict:
        return {
            "text": self.text,
            "paragraphs": list(self.paragraphs),
            "images": list(self.images) if include_images else [],
            "warnings": list(self.warnings),
        }
