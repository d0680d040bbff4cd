MIME_TYPE_MAPPING = {
    # Word Office Open XML
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    # Macro-enabled variant, same package layout
    "application/vnd.ms-word.document.macroEnabled.12": "docm",
}

# Not every platform's mimetypes table knows the macro-enabled variant
SUPPORTED_EXTENSIONS = (".docx", ".docm")


def is_supported_mime_type(mime_type: str | None) -> bool:
    if not mime_type:
        return False
    return mime_type in MIME_TYPE_MAPPING
