"""
SF2 Constants - Chunk tags, size limits and enumerations of SoundFont2 files

Shared by the decoders and the command-line tool.
"""

from enum import IntFlag

# RIFF framing
RIFF_TAG = b"RIFF"
LIST_TAG = b"LIST"
SFBK_FORM = b"sfbk"
INFO_LIST = b"INFO"
SDTA_LIST = b"sdta"
PDTA_LIST = b"pdta"

# sdta sub-chunks
SMPL_TAG = b"smpl"
SM24_TAG = b"sm24"

# INFO sub-chunk size ceilings, in bytes
# SF2 2.04 spec section 5.1
MAX_TEXT_SIZE = 256
MAX_COMMENT_SIZE = 65536
VERSION_SIZE = 4

DEFAULT_SOUND_ENGINE = "EMU8000"


class SampleType(IntFlag):
    """
    Bits of the sfSample sampleType field.
    SF2 2.04 spec section 7.10
    """
    MONO = 1
    RIGHT = 2
    LEFT = 4
    LINKED = 8
    ROM = 0x8000


# Mapping from generator name to ID
# SF2 2.04 spec section 8.1.2 - Generator Enumerators
GENERATOR_IDS = {
    "startAddrsOffset": 0,
    "endAddrsOffset": 1,
    "startloopAddrsOffset": 2,
    "endloopAddrsOffset": 3,
    "startAddrsCoarseOffset": 4,
    "modLfoToPitch": 5,
    "vibLfoToPitch": 6,
    "modEnvToPitch": 7,
    "initialFilterFc": 8,
    "initialFilterQ": 9,
    "modLfoToFilterFc": 10,
    "modEnvToFilterFc": 11,
    "endAddrsCoarseOffset": 12,
    "modLfoToVolume": 13,
    "unused1": 14,
    "chorusEffectsSend": 15,
    "reverbEffectsSend": 16,
    "pan": 17,
    "unused2": 18,
    "unused3": 19,
    "unused4": 20,
    "delayModLFO": 21,
    "freqModLFO": 22,
    "delayVibLFO": 23,
    "freqVibLFO": 24,
    "delayModEnv": 25,
    "attackModEnv": 26,
    "holdModEnv": 27,
    "decayModEnv": 28,
    "sustainModEnv": 29,
    "releaseModEnv": 30,
    "keynumToModEnvHold": 31,
    "keynumToModEnvDecay": 32,
    "delayVolEnv": 33,
    "attackVolEnv": 34,
    "holdVolEnv": 35,
    "decayVolEnv": 36,
    "sustainVolEnv": 37,
    "releaseVolEnv": 38,
    "keynumToVolEnvHold": 39,
    "keynumToVolEnvDecay": 40,
    "instrument": 41,
    "reserved1": 42,
    "keyRange": 43,
    "velRange": 44,
    "startloopAddrsCoarseOffset": 45,
    "keynum": 46,
    "velocity": 47,
    "initialAttenuation": 48,
    "reserved2": 49,
    "endloopAddrsCoarseOffset": 50,
    "coarseTune": 51,
    "fineTune": 52,
    "sampleID": 53,
    "sampleModes": 54,
    "reserved3": 55,
    "scaleTuning": 56,
    "exclusiveClass": 57,
    "overridingRootKey": 58,
    "unused5": 59,
    "endOper": 60
}

# Reverse mapping from generator ID to name
GENERATOR_NAMES = {id_: name for name, id_ in GENERATOR_IDS.items()}


def generator_name(oper):
    """
    Returns the generator name for an operator ID, or "gen<N>" if unknown.
    """
    return GENERATOR_NAMES.get(oper, f"gen{oper}")
