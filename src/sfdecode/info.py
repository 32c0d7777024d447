# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Decoder for the INFO-list chunk (bank metadata).
"""

import logging
import struct
from dataclasses import dataclass
from enum import IntFlag

from .constants import DEFAULT_SOUND_ENGINE, MAX_COMMENT_SIZE, MAX_TEXT_SIZE, VERSION_SIZE
from .errors import DuplicateFieldError, FieldTooLargeError, MalformedFieldError, MissingRequiredFieldError
from .riff import iter_chunks

logger = logging.getLogger(__name__)

_VERSION = struct.Struct("<HH")

# Text is kept byte-for-byte, so every byte value must map to a character
TEXT_ENCODING = "latin-1"


class InfoField(IntFlag):
    """
    The INFO sub-chunks this decoder understands.
    """
    IFIL = 1 << 0
    ISNG = 1 << 1
    INAM = 1 << 2
    IROM = 1 << 3
    IVER = 1 << 4
    ICRD = 1 << 5
    IENG = 1 << 6
    IPRD = 1 << 7
    ICOP = 1 << 8
    ICMT = 1 << 9
    ISFT = 1 << 10


# tag -> (field flag, SoundFontInfo attribute, size limit or None for a version pair)
_FIELDS = {
    b"ifil": (InfoField.IFIL, "version", None),
    b"isng": (InfoField.ISNG, "sound_engine", MAX_TEXT_SIZE),
    b"INAM": (InfoField.INAM, "name", MAX_TEXT_SIZE),
    b"irom": (InfoField.IROM, "rom_name", MAX_TEXT_SIZE),
    b"iver": (InfoField.IVER, "rom_version", None),
    b"ICRD": (InfoField.ICRD, "creation_date", MAX_TEXT_SIZE),
    b"IENG": (InfoField.IENG, "engineers", MAX_TEXT_SIZE),
    b"IPRD": (InfoField.IPRD, "product", MAX_TEXT_SIZE),
    b"ICOP": (InfoField.ICOP, "copyright", MAX_TEXT_SIZE),
    b"ICMT": (InfoField.ICMT, "comments", MAX_COMMENT_SIZE),
    b"ISFT": (InfoField.ISFT, "software", MAX_TEXT_SIZE),
}


@dataclass(frozen=True)
class SoundFontInfo:
    """
    Bank metadata from the INFO-list chunk.

    Text fields hold the raw sub-chunk payload, including any zero
    terminators. Use `trim_zstr` to get the display value.
    """
    version: tuple[int, int]
    sound_engine: str = DEFAULT_SOUND_ENGINE
    name: str = ""
    rom_name: str = ""
    rom_version: tuple[int, int] = (0, 0)
    creation_date: str = ""
    engineers: str = ""
    product: str = ""
    copyright: str = ""
    comments: str = ""
    software: str = ""

    @property
    def version_string(self):
        major, minor = self.version
        return f"{major}.{minor:02d}"


def trim_zstr(text):
    """
    Cuts a zero-terminated string at its first terminator.

    Args:
        text: A raw text field value.

    Returns:
        The text before the first zero character.
    """
    return text.split("\x00", 1)[0]


def _decode_field(tag, data, limit):
    if limit is None:
        if len(data) != VERSION_SIZE:
            raise MalformedFieldError(tag, len(data))
        return _VERSION.unpack(data)

    if len(data) > limit:
        raise FieldTooLargeError(tag, len(data), limit)
    return data.decode(TEXT_ENCODING)


def read_info(f):
    """
    Parses the sub-chunks of an INFO-list chunk.

    Args:
        f: A stream positioned just after the "INFO" list type. It is read
           until exhausted.

    Returns:
        The decoded SoundFontInfo.
    """
    seen = InfoField(0)
    values = {}

    for chunk in iter_chunks(f):
        field = _FIELDS.get(chunk.tag)
        if field is None:
            logger.debug("Skipping unknown INFO sub-chunk %r (%d bytes)", chunk.tag, chunk.size)
            continue

        flag, attr, limit = field
        if seen & flag:
            raise DuplicateFieldError(chunk.tag)
        seen |= flag

        values[attr] = _decode_field(chunk.tag, chunk.data, limit)

    # A file without ifil is structurally unsound.
    # A missing isng falls back to EMU8000 through the dataclass default.
    if not seen & InfoField.IFIL:
        raise MissingRequiredFieldError(b"ifil")

    return SoundFontInfo(**values)
