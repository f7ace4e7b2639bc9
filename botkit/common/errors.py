from __future__ import annotations


class BotkitError(Exception):
    pass


class TransportError(BotkitError):
    """Bot API, network or local read failure while talking to the file storage."""

    def __init__(self, message: str, *, file_id: str | None = None, chat_id: int | str | None = None):
        self.file_id = file_id
        self.chat_id = chat_id
        super().__init__(message)


class ResourceError(BotkitError):
    """A local resource (temporary file) could not be acquired."""
