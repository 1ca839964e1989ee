#!/usr/bin/env python3
"""
m4a song table locator

Command-line interface for finding the m4a song table pointer in GBA ROMs.

Usage:
    m4a-songtable <rom-file>...
    m4a-songtable -h | --help
    m4a-songtable --version

Arguments:
    rom-file           One or more GBA ROM images

Options:
    -h --help          Show this help message
    --version          Show version
    --config PATH      Path to config.json
    --json             Print results as JSON
    --output FILE      Write the JSON report to FILE
    --jobs N           Number of ROMs to scan in parallel
    --quiet            Only print results
"""

import sys
import argparse
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config
from .formats.gba import GbaRom, InputError
from .output.report import SongTableResult, ScanReport


def scan_file(path: str, config: Config) -> SongTableResult:
    """
    Load one ROM and locate its song table.

    Args:
        path: Path to the ROM image
        config: Configuration

    Returns:
        The result; unreadable files produce a result with ``error`` set
    """
    try:
        rom = GbaRom.from_file(path)
    except InputError as e:
        return SongTableResult(name=Path(path).name, error=str(e))

    return rom.locate(
        tolerance=config.match_tolerance,
        stride=config.alignment,
        displacement=config.table_pointer_displacement,
        resolve_pointer=config.resolve_pointer
    )


def scan_files(paths: List[str], config: Config, jobs: int = 1) -> ScanReport:
    """
    Scan a batch of ROMs.

    Scans do not share any state, so with jobs > 1 they run in separate
    processes. Results keep the order of ``paths``.
    """
    if jobs <= 1 or len(paths) <= 1:
        return ScanReport([scan_file(path, config) for path in paths])

    with ProcessPoolExecutor(max_workers=jobs) as executor:
        results = list(executor.map(scan_file, paths, repeat(config)))

    return ScanReport(results)


def print_report(report: ScanReport, config: Config, quiet: bool = False) -> None:
    """Print one block per ROM to stdout, errors to stderr."""
    batch = len(report.results) > 1

    for result in report.results:
        prefix = f"{result.name}: " if batch else ""

        if result.error is not None:
            print(f"ERROR: {prefix}{result.error}", file=sys.stderr)
            continue

        print(f"{prefix}{result.format_line(config.uppercase_hex)}")
        if not quiet:
            for line in result.format_details(config.uppercase_hex, config.show_header):
                print(line)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="m4a song table locator - Find the song table pointer in GBA ROMs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('files', nargs='+', help='GBA ROM images')
    parser.add_argument('--version', action='version', version=f'm4a-songtable {__version__}')
    parser.add_argument('--config', type=str, help='Path to config.json')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--output', type=str, help='Write the JSON report to this file')
    parser.add_argument('--jobs', type=int, default=1, help='Number of ROMs to scan in parallel')
    parser.add_argument('--quiet', action='store_true', help='Only print results')

    args = parser.parse_args(argv)

    # Load config
    config_path = Path(args.config) if args.config else None
    try:
        config = Config.load(config_path)
    except ValueError as e:
        print(f"ERROR: Invalid config: {e}", file=sys.stderr)
        return 2

    if not args.quiet and not args.json:
        print(f"Scanning {len(args.files)} file(s)...")

    report = scan_files(args.files, config, args.jobs)

    if args.json:
        print(report.to_json())
    else:
        print_report(report, config, args.quiet)

    if args.output:
        try:
            report.save(args.output)
        except OSError as e:
            print(f"ERROR: Cannot write report to {args.output}: {e.strerror or e}", file=sys.stderr)
            return 1
        if not args.quiet and not args.json:
            print(f"Report written to {args.output}")

    return 0 if report.all_found else 1


if __name__ == "__main__":
    sys.exit(main())
