# Copyright (c) 2025 bakajikara
#
# This file is licensed under the MIT License (MIT).
# See the LICENSE file in the project root for the full license text.

"""
Command-line interface for sfdecode.

Provides subcommands:
- info: show the bank metadata and record counts
- presets: list presets and, optionally, their zones
- chunks: show the RIFF chunk tree
- extract: write the samples to FLAC files
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .constants import LIST_TAG, RIFF_TAG, generator_name
from .export import export_samples
from .info import trim_zstr
from .parser import SoundFontParser
from .riff import iter_chunks


def _build_root_parser():
    p = argparse.ArgumentParser(prog="sfdecode", description="SoundFont 2 bank decoder")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug messages from the decoder")
    sub = p.add_subparsers(dest="command", required=True)

    c_info = sub.add_parser("info", help="Show bank metadata")
    c_info.add_argument("input_file", help="Input SoundFont file path")

    c_presets = sub.add_parser("presets", help="List the presets of a bank")
    c_presets.add_argument("input_file", help="Input SoundFont file path")
    c_presets.add_argument("-z", "--zones", action="store_true", help="Also list each zone's generators")

    c_chunks = sub.add_parser("chunks", help="Show the RIFF chunk tree")
    c_chunks.add_argument("input_file", help="Input SoundFont file path")

    c_extract = sub.add_parser("extract", help="Write every sample to a FLAC file")
    c_extract.add_argument("input_file", help="Input SoundFont file path")
    c_extract.add_argument("output_directory", nargs="?", help="Output directory to create (default: same name as input file)")
    c_extract.add_argument("-f", "--force", action="store_true", help="Force overwrite without confirmation")

    return p


def print_info(bank):
    info = bank.info
    hydra = bank.hydra

    print(f"Version:       {info.version_string}")
    print(f"Sound engine:  {trim_zstr(info.sound_engine)}")
    print(f"Bank name:     {trim_zstr(info.name)}")

    optional = [
        ("ROM", info.rom_name),
        ("Created", info.creation_date),
        ("Engineers", info.engineers),
        ("Product", info.product),
        ("Copyright", info.copyright),
        ("Software", info.software),
        ("Comments", info.comments),
    ]
    if info.rom_name:
        optional[0] = ("ROM", f"{trim_zstr(info.rom_name)} {info.rom_version[0]}.{info.rom_version[1]:02d}")
    for label, value in optional:
        value = trim_zstr(value)
        if value:
            print(f"{label + ':':<15}{value}")

    bits = 24 if bank.samples.is_24bit else 16
    print(f"Sample data:   {len(bank.samples):,} points ({bits}-bit)")
    print(f"Presets:       {len(hydra.presets)}")
    print(f"Instruments:   {len(hydra.instrument_headers)}")
    print(f"Samples:       {len(hydra.samples)}")


def print_presets(bank, show_zones=False):
    hydra = bank.hydra
    order = sorted(range(len(hydra.presets)), key=lambda i: (hydra.presets[i].bank, hydra.presets[i].preset))
    for idx in order:
        header = hydra.presets[idx]
        zones = hydra.preset_zones(idx)
        print(f"{header.bank:03d}:{header.preset:03d}  {header.display_name}  ({len(zones)} zones)")
        if not show_zones:
            continue
        for zone_number, zone in enumerate(zones):
            gens = ", ".join(f"{generator_name(g.oper)}={g.amount}" for g in zone.generators)
            print(f"    zone {zone_number}: {gens or '-'} [{len(zone.modulators)} modulators]")


def print_chunks(f, indent=0):
    """
    Prints the chunk tree of a RIFF stream, descending into RIFF and LIST chunks.
    """
    for chunk in iter_chunks(f):
        if chunk.tag in (RIFF_TAG, LIST_TAG) and chunk.size >= 4:
            form_type = chunk.data[:4].decode("latin-1")
            print("  " * indent + f"- {chunk.name} ({form_type}) (Size: {chunk.size} bytes)")
            body = chunk.reader()
            body.read(4)
            print_chunks(body, indent + 1)
        else:
            print("  " * indent + f"- {chunk.name} (Size: {chunk.size} bytes)")


def main(argv=None):
    """
    Generic entry point for `python -m sfdecode` or the `sfdecode` script.

    Returns exit code (0 on success).
    """
    argv = list(argv) if argv is not None else None
    parser = _build_root_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s"
    )

    try:
        sf = Path(args.input_file)

        if args.command == "chunks":
            with open(sf, "rb") as f:
                print_chunks(f)
            return 0

        bank = SoundFontParser(sf).parse()

        if args.command == "info":
            print_info(bank)

        elif args.command == "presets":
            print_presets(bank, show_zones=args.zones)

        elif args.command == "extract":
            # Determine output directory if not specified
            if args.output_directory:
                outdir = Path(args.output_directory)
            else:
                # Use the stem of the input file
                outdir = sf.with_suffix("")

            # Warn if output directory exists (unless --force is used)
            if outdir.exists() and not args.force:
                response = input(f"Warning: \"{outdir}\" already exists. Overwrite? (y/n): ")
                if response.lower() != "y":
                    print("Extraction cancelled.")
                    return 0

            written = export_samples(bank, outdir)
            print(f"Created: {len(written)} sample files in {outdir}")

        else:
            parser.print_help()
            return 2
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
