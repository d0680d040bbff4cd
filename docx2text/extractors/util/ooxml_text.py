"""
Paragraph text extraction from WordprocessingML.

Works on the raw text of ``word/document.xml`` instead of a parsed tree. Each
``<w:p>`` block becomes one paragraph; inside a block a single left-to-right
scan picks up, in document order:

    <w:br/>          -> "\\n"   (plain breaks only; typed breaks such as
                                 w:type="page" carry attributes and are dropped)
    <w:tab/>         -> "\\t"   (tab characters only; w:tab stops inside
                                 w:pPr/w:tabs carry attributes and are ignored)
    <w:t>TEXT</w:t>  -> TEXT   (verbatim, entities are kept unless asked)

Tables, text boxes and list items are not reconstructed; their paragraphs are
picked up by the same scan and appear as plain paragraphs.
"""

import logging
import re

logger = logging.getLogger(__name__)

# "<w:p" must be followed by whitespace or ">" so <w:pPr>, <w:proofErr> don't match
_PARAGRAPH_RE = re.compile(r"<w:p[\s>](.*?)</w:p>", re.DOTALL)

# Alternation order is the priority order; one pass keeps tokens in document order
_TOKEN_RE = re.compile(
    r"(?P<br><w:br\s*/>)"
    r"|(?P<tab><w:tab\s*/>)"
    r"|<w:t(?:\s[^>]*)?>(?P<text>[^<]*)</w:t>"
)

_XML_ENTITY_RE = re.compile(r"&(#[xX][0-9a-fA-F]+|#[0-9]+|amp|lt|gt|quot|apos);")

_NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}


def _replace_entity(match: re.Match) -> str:
    name = match.group(1)
    if name in _NAMED_ENTITIES:
        return _NAMED_ENTITIES[name]
    try:
        if name[1] in "xX":
            code_point = int(name[2:], 16)
        else:
            code_point = int(name[1:])
        return chr(code_point)
    except (ValueError, OverflowError):
        # Out-of-range character reference, keep it as written
        return match.group(0)


def decode_xml_entities(text: str) -> str:
    """Decode the predefined XML entities and numeric character references."""
    if "&" not in text:
        return text
    return _XML_ENTITY_RE.sub(_replace_entity, text)


def extract_paragraph_text(block: str, decode_entities: bool = False) -> str:
    """Concatenate the break, tab and text-run tokens of one paragraph block."""
    tokens = []
    for match in _TOKEN_RE.finditer(block):
        if match.group("br") is not None:
            tokens.append("\n")
        elif match.group("tab") is not None:
            tokens.append("\t")
        else:
            text = match.group("text")
            tokens.append(decode_xml_entities(text) if decode_entities else text)
    return "".join(tokens)


def extract_paragraphs(xml: str, decode_entities: bool = False) -> list[str]:
    """
    Extract the non-empty paragraphs of a WordprocessingML document.

    Args:
        xml: Decoded content of ``word/document.xml``.
        decode_entities: Decode ``&amp;`` and friends in text runs. Off by
            default, text is returned exactly as stored in the XML.

    Returns:
        Paragraph strings in document order. Paragraphs that are empty or
        whitespace-only after token concatenation are dropped.
    """
    paragraphs = []
    blocks = 0
    for match in _PARAGRAPH_RE.finditer(xml):
        blocks += 1
        text = extract_paragraph_text(match.group(1), decode_entities)
        if text.strip():
            paragraphs.append(text)

    logger.debug(
        f"Scanned {blocks} paragraph blocks, kept {len(paragraphs)} with text"
    )
    return paragraphs
