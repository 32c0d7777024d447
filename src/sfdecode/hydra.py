# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Decoder for the pdta-list (Hydra) chunk.

The Hydra is nine flat record arrays. Parents own their children by index
range: preset header i owns the bags [bag_index of i, bag_index of i + 1),
and bag j owns the generators and modulators between its indices and those
of bag j + 1. Every array ends with a terminal record so that "i + 1" always
exists for a real record.
"""

import logging
import struct
from dataclasses import astuple, dataclass
from enum import IntFlag
from typing import ClassVar, NamedTuple

from .constants import SampleType
from .errors import InvalidChunkSizeError, MissingChunkError
from .riff import iter_chunks

logger = logging.getLogger(__name__)


class _Record:
    """
    Shared packing logic for fixed-width little-endian records.
    """
    FORMAT: ClassVar[struct.Struct]

    @classmethod
    def size(cls):
        return cls.FORMAT.size

    @classmethod
    def unpack(cls, data):
        return cls(*cls.FORMAT.unpack(data))

    @classmethod
    def unpack_all(cls, data):
        return tuple(cls(*values) for values in cls.FORMAT.iter_unpack(data))

    def pack(self):
        return self.FORMAT.pack(*astuple(self))


class _NamedRecord(_Record):
    name: bytes

    @property
    def display_name(self):
        """
        The name up to its first zero byte.
        """
        return self.name.split(b"\x00", 1)[0].decode("ascii", errors="replace")


@dataclass(frozen=True)
class PresetHeader(_NamedRecord):
    """
    sfPresetHeader (38 bytes).
    """
    FORMAT: ClassVar[struct.Struct] = struct.Struct("<20sHHHIII")

    name: bytes
    preset: int
    bank: int
    bag_index: int
    library: int
    genre: int
    morphology: int


@dataclass(frozen=True)
class Bag(_Record):
    """
    sfPresetBag / sfInstBag (4 bytes).
    """
    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HH")

    gen_index: int
    mod_index: int


@dataclass(frozen=True)
class Modulator(_Record):
    """
    sfModList / sfInstModList (10 bytes).
    """
    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HHhHH")

    src_oper: int
    dest_oper: int
    amount: int
    amt_src_oper: int
    trans_oper: int


@dataclass(frozen=True)
class Generator(_Record):
    """
    sfGenList / sfInstGenList (4 bytes).
    The amount is kept as a signed 16-bit value whatever the operator.
    """
    FORMAT: ClassVar[struct.Struct] = struct.Struct("<Hh")

    oper: int
    amount: int


@dataclass(frozen=True)
class Instrument(_NamedRecord):
    """
    sfInst (22 bytes).
    """
    FORMAT: ClassVar[struct.Struct] = struct.Struct("<20sH")

    name: bytes
    bag_index: int


@dataclass(frozen=True)
class SampleHeader(_NamedRecord):
    """
    sfSample (46 bytes).
    """
    FORMAT: ClassVar[struct.Struct] = struct.Struct("<20sIIIIIBbHH")

    name: bytes
    start: int
    end: int
    start_loop: int
    end_loop: int
    sample_rate: int
    original_pitch: int
    pitch_correction: int
    sample_link: int
    sample_type: int

    @property
    def is_rom(self):
        return bool(self.sample_type & SampleType.ROM)


class Zone(NamedTuple):
    generators: tuple
    modulators: tuple


class HydraChunk(IntFlag):
    """
    The nine pdta sub-chunks, in file order.
    """
    PHDR = 1 << 0
    PBAG = 1 << 1
    PMOD = 1 << 2
    PGEN = 1 << 3
    INST = 1 << 4
    IBAG = 1 << 5
    IMOD = 1 << 6
    IGEN = 1 << 7
    SHDR = 1 << 8


ALL_HYDRA_CHUNKS = HydraChunk(sum(HydraChunk))

# tag -> (chunk flag, Hydra attribute, record type)
HYDRA_CHUNKS = {
    b"phdr": (HydraChunk.PHDR, "preset_headers", PresetHeader),
    b"pbag": (HydraChunk.PBAG, "preset_bags", Bag),
    b"pmod": (HydraChunk.PMOD, "preset_modulators", Modulator),
    b"pgen": (HydraChunk.PGEN, "preset_generators", Generator),
    b"inst": (HydraChunk.INST, "instruments", Instrument),
    b"ibag": (HydraChunk.IBAG, "instrument_bags", Bag),
    b"imod": (HydraChunk.IMOD, "instrument_modulators", Modulator),
    b"igen": (HydraChunk.IGEN, "instrument_generators", Generator),
    b"shdr": (HydraChunk.SHDR, "sample_headers", SampleHeader),
}


def _child_range(records, index, attr):
    """
    Returns the range [records[index].attr, records[index + 1].attr).
    The last record is the terminal record and owns nothing.
    """
    if not 0 <= index < len(records) - 1:
        raise IndexError(f"Record index {index} out of range (0-{len(records) - 2}).")
    return range(getattr(records[index], attr), getattr(records[index + 1], attr))


@dataclass(frozen=True)
class Hydra:
    """
    The nine record arrays of the pdta-list chunk, terminal records included.
    """
    preset_headers: tuple
    preset_bags: tuple
    preset_modulators: tuple
    preset_generators: tuple
    instruments: tuple
    instrument_bags: tuple
    instrument_modulators: tuple
    instrument_generators: tuple
    sample_headers: tuple

    @property
    def presets(self):
        """Preset headers without the terminal record."""
        return self.preset_headers[:-1]

    @property
    def instrument_headers(self):
        """Instrument headers without the terminal record."""
        return self.instruments[:-1]

    @property
    def samples(self):
        """Sample headers without the terminal record."""
        return self.sample_headers[:-1]

    def preset_bag_range(self, preset_index):
        return _child_range(self.preset_headers, preset_index, "bag_index")

    def instrument_bag_range(self, inst_index):
        return _child_range(self.instruments, inst_index, "bag_index")

    def preset_zone(self, bag_index):
        """
        Gets the generators and modulators of one preset zone.
        """
        return self._zone(bag_index, self.preset_bags, self.preset_generators, self.preset_modulators)

    def instrument_zone(self, bag_index):
        """
        Gets the generators and modulators of one instrument zone.
        """
        return self._zone(bag_index, self.instrument_bags, self.instrument_generators, self.instrument_modulators)

    def preset_zones(self, preset_index):
        """
        Gets all zones for a given preset index.
        """
        return [self.preset_zone(bag) for bag in self.preset_bag_range(preset_index)]

    def instrument_zones(self, inst_index):
        """
        Gets all zones for a given instrument index.
        """
        return [self.instrument_zone(bag) for bag in self.instrument_bag_range(inst_index)]

    @staticmethod
    def _zone(bag_index, bags, gens, mods):
        gen_range = _child_range(bags, bag_index, "gen_index")
        mod_range = _child_range(bags, bag_index, "mod_index")
        return Zone(
            generators=gens[gen_range.start:gen_range.stop],
            modulators=mods[mod_range.start:mod_range.stop]
        )


def read_hydra(f):
    """
    Parses the sub-chunks of a pdta-list chunk.

    Args:
        f: A stream positioned just after the "pdta" list type. It is read
           until exhausted.

    Returns:
        The decoded Hydra.
    """
    seen = HydraChunk(0)
    arrays = {}

    for chunk in iter_chunks(f):
        entry = HYDRA_CHUNKS.get(chunk.tag)
        if entry is None:
            logger.debug("Skipping unknown pdta sub-chunk %r (%d bytes)", chunk.tag, chunk.size)
            continue

        flag, attr, record_type = entry
        width = record_type.size()
        if chunk.size % width:
            raise InvalidChunkSizeError(chunk.tag, chunk.size, width)
        if chunk.size == 0:
            # Not even a terminal record
            raise InvalidChunkSizeError(
                chunk.tag, chunk.size, width,
                f"\"{chunk.name}\" chunk must contain at least one {width}-byte record."
            )

        arrays[attr] = record_type.unpack_all(chunk.data)
        seen |= flag
        logger.debug("Read %d records from \"%s\"", len(arrays[attr]), chunk.name)

    missing = ALL_HYDRA_CHUNKS ^ seen
    if missing:
        for tag, (flag, _, _) in HYDRA_CHUNKS.items():
            if missing & flag:
                raise MissingChunkError(tag)

    return Hydra(**arrays)
