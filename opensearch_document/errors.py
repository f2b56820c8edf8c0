"""Exceptions raised by the document builder."""


class DocumentError(Exception):
    """Base class for document builder errors."""


class ClientNotSetError(DocumentError):
    """No client was injected and no default client is configured."""


class MissingFieldError(DocumentError):
    """An identity field or the request body content is missing."""


class InvalidOptionError(DocumentError, ValueError):
    """An enumerated option received a value outside its allowed set.

    Only raised by builders created with ``strict=True``; lenient builders
    log the value and keep the previous one.
    """

    def __init__(self, option: str, value, allowed):
        self.option = option
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid value {value!r} for {option!r}; expected one of {', '.join(self.allowed)}"
        )
