# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Exceptions raised while decoding a SoundFont bank.

Every error derives from SoundFontError, which is a ValueError so callers
that already catch ValueError for malformed files keep working.
"""


def _tag_text(tag):
    if isinstance(tag, bytes):
        return tag.decode("latin-1")
    return str(tag)


class SoundFontError(ValueError):
    """Base class for all SoundFont decoding errors."""


class TruncatedInputError(SoundFontError, EOFError):
    """The source ended before a chunk header or payload was complete."""


class UnexpectedTagError(SoundFontError):
    """A required chunk or list type tag did not match."""

    def __init__(self, expected: bytes, actual: bytes):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected chunk \"{_tag_text(expected)}\", got \"{_tag_text(actual)}\".")


class UnexpectedFormatError(SoundFontError):
    """The outer container is not a RIFF sfbk file."""


class InvalidChunkSizeError(SoundFontError):
    """A chunk size does not fit the records it is supposed to hold."""

    def __init__(self, tag: bytes, size: int, width: int, message: str | None = None):
        self.tag = tag
        self.size = size
        self.width = width
        if message is None:
            message = f"Invalid \"{_tag_text(tag)}\" chunk size {size} (record size is {width} bytes)."
        super().__init__(message)


class MalformedFieldError(SoundFontError):
    """A fixed-size INFO field has the wrong length."""

    def __init__(self, tag: bytes, size: int):
        self.tag = tag
        self.size = size
        super().__init__(f"\"{_tag_text(tag)}\" sub-chunk must contain 4 bytes, got {size}.")


class FieldTooLargeError(SoundFontError):
    """An INFO text field exceeds its maximum size."""

    def __init__(self, tag: bytes, size: int, limit: int):
        self.tag = tag
        self.size = size
        self.limit = limit
        super().__init__(f"\"{_tag_text(tag)}\" sub-chunk must contain {limit} or fewer bytes, got {size}.")


class DuplicateFieldError(SoundFontError):
    """An INFO sub-chunk appeared more than once."""

    def __init__(self, tag: bytes):
        self.tag = tag
        super().__init__(f"Duplicate \"{_tag_text(tag)}\" sub-chunk.")


class MissingRequiredFieldError(SoundFontError):
    """A mandatory INFO sub-chunk was never seen."""

    def __init__(self, tag: bytes):
        self.tag = tag
        super().__init__(f"\"{_tag_text(tag)}\" sub-chunk is missing.")


class MissingChunkError(SoundFontError):
    """A mandatory sdta or pdta sub-chunk was never seen."""

    def __init__(self, tag: bytes):
        self.tag = tag
        super().__init__(f"Missing \"{_tag_text(tag)}\" chunk.")
