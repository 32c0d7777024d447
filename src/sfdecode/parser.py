# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Top-level SoundFont reader.

Walks the RIFF sfbk form and hands the INFO, sdta and pdta lists to their
decoders, in that fixed order.
"""

import logging
from dataclasses import dataclass

from .constants import INFO_LIST, LIST_TAG, PDTA_LIST, RIFF_TAG, SDTA_LIST, SFBK_FORM
from .errors import UnexpectedFormatError
from .hydra import Hydra, read_hydra
from .info import SoundFontInfo, read_info
from .riff import expect_chunk, read_chunk_body, read_chunk_id, read_list_type
from .samples import SampleData, read_samples

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SoundFontBank:
    """
    A fully decoded SoundFont bank.
    """
    info: SoundFontInfo
    samples: SampleData
    hydra: Hydra


def _read_list(f, list_type, decode):
    """
    Reads a LIST chunk of the given type and decodes its body.
    """
    chunk = expect_chunk(f, LIST_TAG)
    body = chunk.reader()
    read_list_type(body, list_type)
    return decode(body)


def read_soundfont(f):
    """
    Decodes a SoundFont bank from a binary stream.

    Args:
        f: A binary file object, read sequentially from its current position.

    Returns:
        The decoded SoundFontBank.

    Raises:
        SoundFontError: If the stream is not a well-formed SF2 bank.
    """
    # The size field of a non-RIFF file means nothing
    if read_chunk_id(f) != RIFF_TAG:
        raise UnexpectedFormatError("Not a RIFF file")
    riff = read_chunk_body(f, RIFF_TAG)

    body = riff.reader()
    if body.read(4) != SFBK_FORM:
        raise UnexpectedFormatError("Not a SoundFont file")

    info = _read_list(body, INFO_LIST, read_info)
    samples = _read_list(body, SDTA_LIST, read_samples)
    hydra = _read_list(body, PDTA_LIST, read_hydra)

    # Anything after the pdta list is left unread
    trailing = riff.size - body.tell()
    if trailing:
        logger.debug("Ignoring %d trailing bytes after the pdta list", trailing)

    return SoundFontBank(info=info, samples=samples, hydra=hydra)


class SoundFontParser:
    """
    A parser for SF2 files.
    """

    def __init__(self, filepath):
        """
        Initializes the SoundFontParser.

        Args:
            filepath: The path to the SF2 file.
        """
        self.filepath = filepath
        self.bank = None

    def parse(self):
        """
        Parses the entire SF2 file.

        Returns:
            The decoded SoundFontBank.
        """
        with open(self.filepath, "rb") as f:
            self.bank = read_soundfont(f)
        return self.bank
