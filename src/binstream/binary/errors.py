from __future__ import annotations


class StreamError(ValueError):
    pass


class BufferUnderflowError(StreamError):
    """A fixed-width or length-prefixed read needed more bytes than remained."""

    def __init__(self, needed: int, available: int, offset: int):
        super().__init__(f"underflow: need {needed} at {offset}, have {available}")
        self.needed = needed
        self.available = available
        self.offset = offset


class InvalidHexError(StreamError):
    pass


class UnsupportedError(StreamError):
    pass


class TextDecodeError(StreamError):
    pass
