# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Decoder for the sdta-list chunk (digital audio samples).
"""

import logging
from dataclasses import dataclass

import numpy as np

from .constants import SM24_TAG, SMPL_TAG
from .errors import InvalidChunkSizeError, MissingChunkError, UnexpectedTagError
from .riff import iter_chunks

logger = logging.getLogger(__name__)


def _frozen(array):
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class SampleData:
    """
    Sample data points of the bank.

    Attributes:
        samples_higher: The 16-bit signed samples from the smpl sub-chunk.
        samples_lower: The signed low bytes from the sm24 sub-chunk. Empty
            when the bank has no sm24 sub-chunk, otherwise the same length
            as samples_higher.
    """
    samples_higher: np.ndarray
    samples_lower: np.ndarray

    def __len__(self):
        return len(self.samples_higher)

    @property
    def is_24bit(self):
        return len(self.samples_lower) > 0

    def to_int32(self):
        """
        Combines both arrays into 24-bit sample values.
        Without sm24 data the low byte is zero.

        Returns:
            An int32 array of values in the signed 24-bit range.
        """
        values = self.samples_higher.astype(np.int32) << 8
        if self.is_24bit:
            values |= self.samples_lower.view(np.uint8).astype(np.int32)
        return values

    def slice(self, header):
        """
        Returns the data points of one sample header.

        Args:
            header: A SampleHeader; its [start, end) range is used.

        Returns:
            A tuple (higher, lower) of array views. `lower` is empty when
            the bank has no sm24 data.
        """
        higher = self.samples_higher[header.start:header.end]
        lower = self.samples_lower[header.start:header.end] if self.is_24bit else self.samples_lower
        return higher, lower


def read_samples(f):
    """
    Parses the sub-chunks of an sdta-list chunk.

    Args:
        f: A stream positioned just after the "sdta" list type.

    Returns:
        The decoded SampleData.
    """
    chunks = iter_chunks(f)

    # The smpl sub-chunk is mandatory and must come first
    smpl = next(chunks, None)
    if smpl is None:
        raise MissingChunkError(SMPL_TAG)
    if smpl.tag != SMPL_TAG:
        raise UnexpectedTagError(SMPL_TAG, smpl.tag)
    if smpl.size % 2:
        raise InvalidChunkSizeError(SMPL_TAG, smpl.size, 2)

    higher = _frozen(np.frombuffer(smpl.data, dtype="<i2").astype(np.int16))
    lower = _frozen(np.zeros(0, dtype=np.int8))

    # sm24 is optional; the end of the list means there is none
    sm24 = next(chunks, None)
    if sm24 is None:
        logger.debug("No sm24 sub-chunk; %d 16-bit samples", len(higher))
        return SampleData(higher, lower)

    if sm24.tag != SM24_TAG:
        raise UnexpectedTagError(SM24_TAG, sm24.tag)
    if sm24.size != len(higher):
        raise InvalidChunkSizeError(
            SM24_TAG, sm24.size, 1,
            f"\"sm24\" chunk size {sm24.size} does not match the {len(higher)} samples in \"smpl\"."
        )

    lower = _frozen(np.frombuffer(sm24.data, dtype=np.int8).copy())
    logger.debug("Read %d 24-bit samples", len(higher))
    return SampleData(higher, lower)
