"""Tests for the pdta-list (Hydra) decoder."""

import io
import struct

import pytest

from sfdecode.constants import SampleType
from sfdecode.errors import InvalidChunkSizeError, MissingChunkError
from sfdecode.hydra import (
    HYDRA_CHUNKS,
    Bag,
    Generator,
    Instrument,
    Modulator,
    PresetHeader,
    SampleHeader,
    read_hydra
)

from builders import chunk, hydra_chunks, hydra_records, name20

HYDRA_TAGS = list(HYDRA_CHUNKS)

WIDTHS = {
    b"phdr": 38,
    b"pbag": 4,
    b"pmod": 10,
    b"pgen": 4,
    b"inst": 22,
    b"ibag": 4,
    b"imod": 10,
    b"igen": 4,
    b"shdr": 46,
}


def decode(*chunks):
    return read_hydra(io.BytesIO(b"".join(chunks)))


@pytest.fixture
def hydra():
    return decode(*hydra_chunks())


class TestReadHydra:
    """Test cases for Hydra decoding."""

    def test_all_nine_chunks(self, hydra):
        assert len(hydra.preset_headers) == 2
        assert len(hydra.preset_bags) == 2
        assert len(hydra.preset_modulators) == 1
        assert len(hydra.preset_generators) == 2
        assert len(hydra.instruments) == 2
        assert len(hydra.instrument_bags) == 2
        assert len(hydra.instrument_modulators) == 2
        assert len(hydra.instrument_generators) == 3
        assert len(hydra.sample_headers) == 2

    def test_record_widths(self):
        for tag, (_, _, record_type) in HYDRA_CHUNKS.items():
            assert record_type.size() == WIDTHS[tag]

    def test_preset_header_fields(self, hydra):
        assert hydra.preset_headers[0] == PresetHeader(name20("Piano"), 0, 0, 0, 0, 0, 0)
        assert hydra.preset_headers[1].bag_index == 1

    def test_terminal_records_are_kept(self, hydra):
        assert hydra.preset_headers[-1].name == name20("EOP")
        assert hydra.instruments[-1].name == name20("EOI")
        assert hydra.sample_headers[-1].name == name20("EOS")

    def test_sample_header_fields(self, hydra):
        header = hydra.sample_headers[0]
        assert header.display_name == "Piano C4"
        assert (header.start, header.end, header.start_loop, header.end_loop) == (0, 4, 1, 3)
        assert header.sample_rate == 44100
        assert header.original_pitch == 60
        assert header.pitch_correction == -5
        assert header.sample_type == SampleType.MONO
        assert not header.is_rom

    def test_multibyte_fields_are_little_endian(self):
        header = PresetHeader.unpack(
            b"P" * 20 + b"\x01\x02" + b"\x03\x04" + b"\x05\x06"
            + b"\x07\x08\x09\x0a" + b"\x0b\x0c\x0d\x0e" + b"\x0f\x10\x11\x12"
        )
        assert header.preset == 0x0201
        assert header.bank == 0x0403
        assert header.bag_index == 0x0605
        assert header.library == 0x0a090807
        assert header.genre == 0x0e0d0c0b
        assert header.morphology == 0x1211100f

    def test_signed_amounts(self):
        assert Generator.unpack(b"\x30\x00\xff\xff") == Generator(48, -1)
        assert Modulator.unpack(b"\x02\x05\x30\x00\x40\xfc\x00\x00\x00\x00").amount == -960

    def test_generator_amount_raw(self, hydra):
        key_range = hydra.instrument_generators[0]
        assert key_range.oper == 43
        assert key_range.amount == 127 << 8

    @pytest.mark.parametrize("tag", HYDRA_TAGS)
    def test_missing_chunk(self, tag):
        with pytest.raises(MissingChunkError) as excinfo:
            decode(*hydra_chunks(skip=(tag,)))
        assert excinfo.value.tag == tag
        assert tag.decode("ascii") in str(excinfo.value)

    def test_missing_everything_names_first_chunk(self):
        with pytest.raises(MissingChunkError) as excinfo:
            decode()
        assert excinfo.value.tag == b"phdr"

    @pytest.mark.parametrize("tag", HYDRA_TAGS)
    def test_invalid_chunk_size(self, tag):
        bad = hydra_records()[tag] + b"\x00"
        with pytest.raises(InvalidChunkSizeError) as excinfo:
            decode(*hydra_chunks(override={tag: bad}))
        assert excinfo.value.tag == tag
        assert excinfo.value.width == WIDTHS[tag]
        assert excinfo.value.size == len(bad)

    @pytest.mark.parametrize("tag", HYDRA_TAGS)
    def test_empty_chunk(self, tag):
        with pytest.raises(InvalidChunkSizeError):
            decode(*hydra_chunks(override={tag: b""}))

    def test_unknown_chunks_are_skipped(self):
        chunks = hydra_chunks()
        chunks.insert(3, chunk(b"xtra", b"\x01\x02\x03"))
        hydra = decode(*chunks, chunk(b"tail", b""))
        assert len(hydra.preset_generators) == 2

    def test_chunk_order_does_not_matter(self):
        hydra = decode(*reversed(hydra_chunks()))
        assert hydra == decode(*hydra_chunks())


class TestRecordRoundTrip:
    """Packing a decoded record reproduces its bytes."""

    @pytest.mark.parametrize("record_type, data", [
        (PresetHeader, name20("Grand Piano") + struct.pack("<HHHIII", 1, 128, 7, 1, 2, 3)),
        (Bag, struct.pack("<HH", 65535, 12)),
        (Modulator, struct.pack("<HHhHH", 0x0502, 48, -32768, 0x0102, 2)),
        (Generator, struct.pack("<Hh", 17, -500)),
        (Instrument, b"\xffweird\x00name" + bytes(9) + struct.pack("<H", 300)),
        (SampleHeader, name20("Loop") + struct.pack("<IIIIIBbHH", 10, 4000000000, 20, 30, 96000, 255, -128, 3, 0x8004)),
    ])
    def test_round_trip(self, record_type, data):
        assert record_type.unpack(data).pack() == data

    def test_unpack_all(self):
        data = struct.pack("<HH", 0, 0) + struct.pack("<HH", 3, 1)
        assert Bag.unpack_all(data) == (Bag(0, 0), Bag(3, 1))


class TestZoneRanges:
    """Test cases for index-range queries."""

    def test_views_drop_terminal_record(self, hydra):
        assert [p.display_name for p in hydra.presets] == ["Piano"]
        assert [i.display_name for i in hydra.instrument_headers] == ["Piano Inst"]
        assert [s.display_name for s in hydra.samples] == ["Piano C4"]

    def test_preset_bag_range(self, hydra):
        assert hydra.preset_bag_range(0) == range(0, 1)

    def test_preset_zones(self, hydra):
        zones = hydra.preset_zones(0)
        assert len(zones) == 1
        assert zones[0].generators == (Generator(41, 0),)
        assert zones[0].modulators == ()

    def test_instrument_zones(self, hydra):
        zones = hydra.instrument_zones(0)
        assert len(zones) == 1
        assert [g.oper for g in zones[0].generators] == [43, 53]
        assert zones[0].modulators == (Modulator(0x0502, 48, 960, 0, 0),)

    def test_terminal_record_owns_nothing(self, hydra):
        with pytest.raises(IndexError):
            hydra.preset_bag_range(1)
        with pytest.raises(IndexError):
            hydra.instrument_zones(1)
        with pytest.raises(IndexError):
            hydra.preset_zone(1)

    def test_negative_index(self, hydra):
        with pytest.raises(IndexError):
            hydra.preset_zones(-1)

    def test_multiple_presets(self):
        records = hydra_records()
        records[b"phdr"] = b"".join(
            struct.pack("<20sHHHIII", name20(name), n, 0, bag, 0, 0, 0)
            for n, (name, bag) in enumerate([("A", 0), ("B", 0), ("C", 1), ("EOP", 3)])
        )
        records[b"pbag"] = b"".join(struct.pack("<HH", g, 0) for g in (0, 1, 1, 2))
        records[b"pgen"] = b"".join(struct.pack("<Hh", 41, 0) for _ in range(3))
        hydra = decode(*(chunk(tag, data) for tag, data in records.items()))

        assert hydra.preset_zones(0) == []
        assert len(hydra.preset_zones(1)) == 1
        assert [len(z.generators) for z in hydra.preset_zones(2)] == [0, 1]


def test_display_name_stops_at_terminator():
    inst = Instrument(b"Strings\x00junk".ljust(20, b"\x00"), 0)
    assert inst.display_name == "Strings"


def test_rom_sample():
    header = SampleHeader(name20("rom"), 0, 0, 0, 0, 0, 60, 0, 0, SampleType.ROM | SampleType.MONO)
    assert header.is_rom
