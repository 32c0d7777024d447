"""Test configuration and fixtures."""

import io

import pytest

from builders import soundfont


@pytest.fixture
def sf2_data():
    """Return raw bytes of a minimal SoundFont bank."""
    return soundfont()


@pytest.fixture
def sf2_stream(sf2_data):
    return io.BytesIO(sf2_data)


@pytest.fixture
def sf2_file(tmp_path, sf2_data):
    """Return path to a minimal SoundFont file."""
    path = tmp_path / "test.sf2"
    path.write_bytes(sf2_data)
    return path
