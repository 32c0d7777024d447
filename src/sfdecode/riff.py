# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
RIFF (Resource Interchange File Format) utility functions.
Provides functions to read RIFF chunks, including LIST chunks, from a
sequential binary stream.
"""

import io
import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from .errors import TruncatedInputError, UnexpectedTagError

_SIZE = struct.Struct("<I")


def _read_exact(f: BinaryIO, size: int, what: str) -> bytes:
    data = f.read(size)
    if len(data) < size:
        raise TruncatedInputError(f"Unexpected end of file while reading {what} ({len(data)} of {size} bytes).")
    return data


@dataclass(frozen=True)
class Chunk:
    """
    A single RIFF chunk.

    Attributes:
        tag: The 4-byte chunk ID. Not necessarily printable ASCII.
        size: The size declared in the chunk header.
        data: The payload, exactly `size` bytes long.
    """
    tag: bytes
    size: int
    data: bytes

    def reader(self) -> BinaryIO:
        """
        Returns a new stream over this chunk's payload only.
        """
        return io.BytesIO(self.data)

    @property
    def name(self) -> str:
        return self.tag.decode("latin-1")


def read_chunk_header(f: BinaryIO) -> tuple[bytes, int]:
    """
    Reads a RIFF chunk header (ID and size) from a file.

    Args:
        f: The file object to read from.

    Returns:
        A tuple containing the chunk ID (bytes) and chunk size (int).
    """
    chunk_id = _read_exact(f, 4, "chunk ID")
    chunk_size = _SIZE.unpack(_read_exact(f, 4, "chunk size"))[0]
    return chunk_id, chunk_size


def read_chunk_id(f: BinaryIO) -> bytes:
    """
    Reads the 4-byte ID that starts a chunk.
    """
    return _read_exact(f, 4, "chunk ID")


def read_chunk_body(f: BinaryIO, chunk_id: bytes) -> Chunk:
    """
    Reads the size and payload of a chunk whose ID was already read.

    Args:
        f: A stream positioned just after the chunk ID.
        chunk_id: The chunk ID that was read.

    Returns:
        The complete chunk.
    """
    chunk_size = _SIZE.unpack(_read_exact(f, 4, "chunk size"))[0]
    data = _read_exact(f, chunk_size, f"\"{chunk_id.decode('latin-1')}\" chunk data")
    return Chunk(chunk_id, chunk_size, data)


def read_chunk(f: BinaryIO) -> Chunk:
    """
    Reads a complete chunk (header and payload) from a file.
    No padding byte is consumed after an odd-sized payload.

    Args:
        f: The file object to read from.

    Returns:
        The chunk that was read.

    Raises:
        TruncatedInputError: If the tag, size or payload is incomplete.
    """
    return read_chunk_body(f, read_chunk_id(f))


def expect_chunk(f: BinaryIO, tag: bytes) -> Chunk:
    """
    Reads a chunk and checks that its ID matches the expected one.

    Args:
        f: The file object to read from.
        tag: The expected 4-byte chunk ID.

    Returns:
        The chunk that was read.

    Raises:
        UnexpectedTagError: If the chunk ID differs from `tag`.
    """
    chunk = read_chunk(f)
    if chunk.tag != tag:
        raise UnexpectedTagError(tag, chunk.tag)
    return chunk


def iter_chunks(f: BinaryIO) -> Iterator[Chunk]:
    """
    Yields consecutive chunks until the stream ends on a chunk boundary.

    A stream that ends in the middle of a header or payload still raises
    TruncatedInputError.
    """
    while True:
        chunk_id = f.read(4)
        if not chunk_id:
            return
        if len(chunk_id) < 4:
            raise TruncatedInputError(f"Unexpected end of file while reading chunk ID ({len(chunk_id)} of 4 bytes).")
        yield read_chunk_body(f, chunk_id)


def read_list_type(f: BinaryIO, list_type: bytes) -> None:
    """
    Reads the 4-byte type at the start of a LIST payload and checks it.

    Args:
        f: A stream positioned at the start of the LIST payload.
        list_type: The expected list type (e.g., b"INFO", b"pdta").

    Raises:
        UnexpectedTagError: If the list type differs.
    """
    actual = _read_exact(f, 4, "list type")
    if actual != list_type:
        raise UnexpectedTagError(list_type, actual)
