# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

from .errors import (
    DuplicateFieldError,
    FieldTooLargeError,
    InvalidChunkSizeError,
    MalformedFieldError,
    MissingChunkError,
    MissingRequiredFieldError,
    SoundFontError,
    TruncatedInputError,
    UnexpectedFormatError,
    UnexpectedTagError
)
from .hydra import Bag, Generator, Hydra, Instrument, Modulator, PresetHeader, SampleHeader, Zone, read_hydra
from .info import SoundFontInfo, read_info, trim_zstr
from .parser import SoundFontBank, SoundFontParser, read_soundfont
from .riff import Chunk, expect_chunk, iter_chunks, read_chunk
from .samples import SampleData, read_samples

__all__ = [
    "Bag",
    "Chunk",
    "DuplicateFieldError",
    "FieldTooLargeError",
    "Generator",
    "Hydra",
    "Instrument",
    "InvalidChunkSizeError",
    "MalformedFieldError",
    "MissingChunkError",
    "MissingRequiredFieldError",
    "Modulator",
    "PresetHeader",
    "SampleData",
    "SampleHeader",
    "SoundFontBank",
    "SoundFontError",
    "SoundFontInfo",
    "SoundFontParser",
    "TruncatedInputError",
    "UnexpectedFormatError",
    "UnexpectedTagError",
    "Zone",
    "expect_chunk",
    "iter_chunks",
    "read_chunk",
    "read_hydra",
    "read_info",
    "read_samples",
    "read_soundfont",
    "trim_zstr"
]
