"""Command-line interface for formula analysis and structure matching."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ...core.domain.models.formula_report import FormulaReport
from ...core.domain.models.reference_library import REFERENCE_MOLECULES
from ...core.exceptions import ChemError
from ...core.services.formula_service import FormulaService


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="lipidmol", description="Chemical formula and fatty acyl chain tools"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable informational logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    formula = subparsers.add_parser("formula", help="Analyze a molecular formula")
    formula.add_argument("text", help="Formula such as C2H5OH")
    formula.add_argument("--json", action="store_true", help="Print JSON output")

    cu = subparsers.add_parser("cu", help="Expand a carbon:unsaturation shorthand")
    cu.add_argument("text", help="Shorthand such as 18:1")
    cu.add_argument("--json", action="store_true", help="Print JSON output")

    match = subparsers.add_parser(
        "match", help="Subgraph matching between reference molecules"
    )
    match.add_argument("pattern", choices=list(REFERENCE_MOLECULES))
    match.add_argument(
        "target",
        nargs="?",
        choices=list(REFERENCE_MOLECULES),
        help="Molecule to search in (default: every reference molecule)",
    )
    return parser


def format_report(report: FormulaReport) -> str:
    """Render a report as aligned text lines."""
    rows = [
        ("formula", report.canonical),
        ("weight", f"{report.weight:.4f}"),
        ("unsaturation", str(report.unsaturation)),
        ("saturation", f"{report.saturation:#}"),
        ("cu", report.cu.render() if report.cu is not None else "-"),
    ]
    return "\n".join(f"{label:<13}{value}" for label, value in rows)


def run(args: argparse.Namespace, service: FormulaService) -> None:
    """Execute one parsed command and print its result."""
    if args.command in ("formula", "cu"):
        if args.command == "formula":
            report = service.analyze(args.text)
        else:
            report = service.cu_report(args.text)
        if args.json:
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print(format_report(report))
        return

    pattern = service.reference(args.pattern)
    if args.target is not None:
        found = pattern.is_isomorphic_subgraph(service.reference(args.target))
        print(f"{args.pattern} in {args.target}: {'yes' if found else 'no'}")
    else:
        for name in service.containing(pattern):
            print(name)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lipidmol CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        run(args, FormulaService())
    except ChemError as e:
        logging.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
