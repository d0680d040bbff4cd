"""
Word Document Extractor Package
===============================

Reads .docx files straight from their bytes: a ZIP local-header walk, raw
DEFLATE inflation through ``zlib`` and an ordered token scan over
``word/document.xml``. No ``zipfile``, XML parser or python-docx involved.

Modules
-------
docx_extractor:
    Orchestrates a parse and returns a DocxParseResult.
data_types:
    ZipEntry and DocxParseResult.
util.zip_reader:
    Local file header walk.
util.inflate:
    Store passthrough and raw DEFLATE inflation.
util.ooxml_text:
    Paragraph, break and tab scan over WordprocessingML.
util.image_utils:
    word/media/* raster images as data URIs.
util.container:
    OLE2 detection for better error messages on .doc and encrypted files.
util.limits:
    DocxParseLimits tunables.
"""

from docx2text.extractors.docx_extractor import parse_docx, read_docx

__all__ = [
    "parse_docx",
    "read_docx",
]
