"""Byte builders for SoundFont test data."""

import struct

SAMPLES = (0, 1000, -1000, 32767)


def chunk(tag, data):
    """Frame a payload as a RIFF chunk, without a pad byte."""
    return tag + struct.pack("<I", len(data)) + data


def list_chunk(list_type, *chunks):
    return chunk(b"LIST", list_type + b"".join(chunks))


def name20(text):
    return text.encode("ascii").ljust(20, b"\x00")


def version(major, minor):
    return struct.pack("<HH", major, minor)


def info_chunks(name=b"Test Bank", with_ifil=True, engine=None):
    chunks = []
    if with_ifil:
        chunks.append(chunk(b"ifil", version(2, 1)))
    if engine is not None:
        chunks.append(chunk(b"isng", engine))
    chunks.append(chunk(b"INAM", name))
    return chunks


def sample_chunks(samples=SAMPLES, sm24=None):
    chunks = [chunk(b"smpl", struct.pack(f"<{len(samples)}h", *samples))]
    if sm24 is not None:
        chunks.append(chunk(b"sm24", struct.pack(f"<{len(sm24)}b", *sm24)))
    return chunks


def hydra_records():
    """
    One preset -> one instrument -> one sample, plus the terminal records.
    """
    return {
        b"phdr": (
            struct.pack("<20sHHHIII", name20("Piano"), 0, 0, 0, 0, 0, 0)
            + struct.pack("<20sHHHIII", name20("EOP"), 0, 0, 1, 0, 0, 0)
        ),
        b"pbag": struct.pack("<HH", 0, 0) + struct.pack("<HH", 1, 0),
        b"pmod": struct.pack("<HHhHH", 0, 0, 0, 0, 0),
        # instrument = 0, then the terminal generator
        b"pgen": struct.pack("<Hh", 41, 0) + struct.pack("<Hh", 0, 0),
        b"inst": struct.pack("<20sH", name20("Piano Inst"), 0) + struct.pack("<20sH", name20("EOI"), 1),
        b"ibag": struct.pack("<HH", 0, 0) + struct.pack("<HH", 2, 1),
        b"imod": struct.pack("<HHhHH", 0x0502, 48, 960, 0, 0) + struct.pack("<HHhHH", 0, 0, 0, 0, 0),
        # keyRange 0-127, sampleID = 0, then the terminal generator
        b"igen": struct.pack("<Hh", 43, 127 << 8) + struct.pack("<Hh", 53, 0) + struct.pack("<Hh", 0, 0),
        b"shdr": (
            struct.pack("<20sIIIIIBbHH", name20("Piano C4"), 0, 4, 1, 3, 44100, 60, -5, 0, 1)
            + struct.pack("<20sIIIIIBbHH", name20("EOS"), 0, 0, 0, 0, 0, 0, 0, 0, 0)
        ),
    }


def hydra_chunks(skip=(), override=None):
    records = hydra_records()
    records.update(override or {})
    return [chunk(tag, data) for tag, data in records.items() if tag not in skip]


def soundfont(info=None, samples=None, hydra=None, trailing=b""):
    """Build a complete sfbk RIFF file."""
    info = info_chunks() if info is None else info
    samples = sample_chunks() if samples is None else samples
    hydra = hydra_chunks() if hydra is None else hydra
    body = (
        b"sfbk"
        + list_chunk(b"INFO", *info)
        + list_chunk(b"sdta", *samples)
        + list_chunk(b"pdta", *hydra)
        + trailing
    )
    return chunk(b"RIFF", body)
