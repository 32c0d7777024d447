# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Writes the samples of a decoded bank to audio files.
"""

import logging
from pathlib import Path

import numpy as np
import soundfile as sf

logger = logging.getLogger(__name__)


def sanitize_filename(name):
    """
    Replaces characters that are invalid in filenames with underscores.

    Args:
        name: The original filename.

    Returns:
        The sanitized filename.
    """
    invalid_chars = "<>:\"/\\|?*"
    for char in invalid_chars:
        name = name.replace(char, "_")
    return name.strip()


def sample_pcm(bank, header):
    """
    Returns the PCM data of one sample header and the soundfile subtype for it.

    24-bit samples are returned left-aligned in int32, which is how
    soundfile expects PCM_24 data.
    """
    higher, lower = bank.samples.slice(header)
    if len(lower) == 0:
        return np.asarray(higher, dtype=np.int16), "PCM_16"

    audio_pcm = (higher.astype(np.int32) << 16) + (lower.view(np.uint8).astype(np.int32) << 8)
    return audio_pcm, "PCM_24"


def write_sample(bank, sample_index, output_path):
    """
    Writes one sample of the bank to a mono audio file.
    The format is taken from the file extension (e.g., .flac, .wav).

    Args:
        bank: The decoded SoundFontBank.
        sample_index: Index into bank.hydra.samples (terminal record excluded).
        output_path: The destination path.
    """
    header = bank.hydra.samples[sample_index]
    if header.is_rom:
        raise ValueError(f"Sample \"{header.display_name}\" refers to ROM data and cannot be exported.")
    if not header.start <= header.end <= len(bank.samples):
        raise ValueError(
            f"Sample \"{header.display_name}\" range {header.start}-{header.end} "
            f"is outside the sample data ({len(bank.samples)} points)."
        )

    audio_pcm, subtype = sample_pcm(bank, header)
    sf.write(output_path, audio_pcm, header.sample_rate, subtype=subtype)


def export_samples(bank, output_dir, extension=".flac"):
    """
    Writes every non-ROM sample of the bank into a directory.

    Args:
        bank: The decoded SoundFontBank.
        output_dir: The output directory; created if missing.
        extension: The audio file extension.

    Returns:
        The list of written paths.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    used_names = set()
    for idx, header in enumerate(bank.hydra.samples):
        if header.is_rom:
            logger.warning("Skipping ROM sample \"%s\"", header.display_name)
            continue

        # Make basename unique, also against names produced by earlier renames
        initial_basename = sanitize_filename(header.display_name) or f"sample_{idx}"
        basename = initial_basename
        count = 1
        while basename in used_names:
            basename = f"{initial_basename}_{count}"
            count += 1
        used_names.add(basename)

        path = output_dir / f"{basename}{extension}"
        write_sample(bank, idx, path)
        written.append(path)
        logger.debug("Wrote %s", path)

    return written
