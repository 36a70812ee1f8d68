"""
Command line front end.

Loads a shared parameter file and prints it back as text, JSON or YAML,
optionally followed by a catalogue report.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sharedparams.analyzer import CatalogueReport, analyze_catalogue
from sharedparams.document import parse_file, serialize
from sharedparams.serialization import document_to_json, document_to_yaml


FORMATTERS = {
    "text": serialize,
    "json": document_to_json,
    "yaml": document_to_yaml,
}


def format_report(report: CatalogueReport) -> str:
    """Render a CatalogueReport as plain text."""
    lines = [
        "=" * 60,
        f"SHARED PARAMETER FILE (version {report.version}, min {report.min_version})",
        "=" * 60,
        f"  Groups:                {report.total_groups}",
        f"  Parameters:            {report.total_parameters}",
        f"  Hidden:                {report.hidden_parameters}",
        f"  Read-only:             {report.read_only_parameters}",
        f"  With description:      {report.described_parameters}",
    ]

    if report.parameters_per_group:
        lines.append("")
        lines.append("  Parameters per group:")
        for name, count in report.parameters_per_group.items():
            lines.append(f"    {name}: {count}")

    if report.parameters_per_type:
        lines.append("")
        lines.append("  Parameters per data type:")
        for tag, count in sorted(report.parameters_per_type.items()):
            lines.append(f"    {tag}: {count}")

    if report.warnings:
        lines.append("")
        lines.append("  Warnings:")
        for warning in report.warnings:
            lines.append(f"    - {warning}")

    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sharedparams",
        description="Read, convert and inspect shared parameter files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Usage examples:
  sharedparams SharedParams.txt
  sharedparams SharedParams.txt --format yaml
  sharedparams SharedParams.txt --report
  sharedparams old.txt -o normalized.txt
''',
    )
    parser.add_argument("input", type=Path, help="Path to the shared parameter file")
    parser.add_argument("--format", choices=sorted(FORMATTERS), default="text",
                        help="Output format (default: text)")
    parser.add_argument("--report", action="store_true",
                        help="Print a catalogue report instead of the file contents")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write output to a file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = parse_file(args.input)
    except (OSError, ValueError) as e:  # includes SharedParameterError and UnicodeDecodeError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.report:
        output = format_report(analyze_catalogue(document))
    else:
        output = FORMATTERS[args.format](document)

    if args.output is not None:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(output)
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0
