import io
import logging

import olefile

logger = logging.getLogger(__name__)

# Streams an OOXML package gets wrapped in when it is password protected
_ENCRYPTION_STREAMS = ("EncryptionInfo", "EncryptedPackage")


def is_ole_container(data: bytes | bytearray | memoryview) -> bool:
    """Check whether the buffer is an OLE2 compound file instead of a ZIP."""
    return olefile.isOleFile(io.BytesIO(bytes(data[:8])))


def is_encrypted_ooxml(data: bytes | bytearray | memoryview) -> bool:
    """
    Check whether the buffer is an OLE2 wrapper around an encrypted OOXML package.

    Word stores password-protected .docx files this way; a legacy .doc is an
    OLE2 file as well but carries no encryption streams.
    """
    if not is_ole_container(data):
        return False
    try:
        with olefile.OleFileIO(io.BytesIO(bytes(data))) as ole:
            return any(ole.exists(stream) for stream in _ENCRYPTION_STREAMS)
    except Exception as e:
        # Only used to word an error message; a broken OLE2 file is just "not encrypted"
        logger.debug(f"Could not open OLE2 container - {e}")
        return False


def describe_non_zip(data: bytes | bytearray | memoryview) -> str | None:
    """Explain a buffer that failed the ZIP signature check, if it is recognisable."""
    if is_encrypted_ooxml(data):
        return "document is encrypted or password-protected"
    if is_ole_container(data):
        return "legacy binary .doc format is not supported"
    return None
