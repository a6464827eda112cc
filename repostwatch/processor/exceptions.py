class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UnsupportedInputError(ProcessorError):
    """Raised when an upload has a media type the pipeline cannot handle."""


class EmptyInputError(ProcessorError):
    """Raised when an upload carries no bytes."""


class InputTooLargeError(ProcessorError):
    """Raised when an upload exceeds the configured size limit."""


class ItemNotFoundError(ProcessorError):
    """Raised when an item id is not known to the registry."""
