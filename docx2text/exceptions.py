class ExtractionError(Exception):
    """Base class for all errors raised while extracting a Word document."""

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        # Use exception chaining if cause is provided
        self.__cause__ = cause


class ExtractionFileFormatNotSupportedError(ExtractionError):
    """Raised when the file format for extraction is not supported."""

    def __init__(self, file_path: str, message: str = None, *, cause: Exception = None):
        self.file_path = file_path
        if message is None:
            message = f"Extraction file format not supported: {file_path}"
        super().__init__(message, cause=cause)


class ExtractionInvalidArchiveError(ExtractionError):
    """Raised when the buffer is not a ZIP container holding a Word main document."""


class ExtractionDecompressionError(ExtractionError):
    """Raised when a ZIP entry cannot be inflated."""


class ExtractionUnsupportedCompressionError(ExtractionDecompressionError):
    """Raised for ZIP entries using a method other than Store or Deflate."""

    def __init__(self, method: int, filename: str | None = None):
        self.method = method
        self.filename = filename
        message = f"Unsupported ZIP compression method: {method}"
        if filename:
            message += f" [{filename}]"
        super().__init__(message)
