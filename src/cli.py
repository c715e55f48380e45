"""Command-line entry points for resgen.

Usage::

    python -m src.cli user
    python -m src.cli billing/invoices/order --layout split-route-module
    python -m src.cli order --output-root ./api --dry-run

The fixed-layout commands (``resource-cli``, ``nested-resource-cli``,
``resource-split-cli``, ``resource-basic-cli``) take the same arguments minus
``--layout``.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from src.config import GeneratorConfig, LayoutMode
from src.scaffolder import FilesystemError, ResourceGenerator, ScaffoldError
from src.utils import console, print_error, print_plan, print_report, print_success

__version__ = "1.0.0"

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_FILESYSTEM = 2


def build_parser(fixed_layout: Optional[LayoutMode] = None) -> argparse.ArgumentParser:
    """Argument parser; ``--layout`` is only offered when no layout is fixed."""
    parser = argparse.ArgumentParser(
        prog="resgen",
        description=(
            "Generate route, controller, model, interface, validation and "
            "service files for a new resource"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  resgen user\n"
            "  resgen billing/invoices/order --layout colocated\n"
        ),
    )
    parser.add_argument(
        "path",
        help="Resource name, optionally nested (e.g. folder1/folder2/resourceName)",
    )
    if fixed_layout is None:
        parser.add_argument(
            "--layout",
            choices=[mode.value for mode in LayoutMode],
            default=None,
            help="Artifact layout (default: RESGEN_LAYOUT or colocated-service)",
        )
    parser.add_argument(
        "--output-root", "-o",
        default=None,
        help="Project root that receives src/ (default: RESGEN_OUTPUT_ROOT or .)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render everything but write nothing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Optional[Sequence[str]] = None, fixed_layout: Optional[LayoutMode] = None) -> int:
    """Parse ``argv``, generate the resource and return the exit code."""
    args = build_parser(fixed_layout).parse_args(argv)
    layout = fixed_layout or getattr(args, "layout", None)

    try:
        config = GeneratorConfig.from_env(output_root=args.output_root, layout=layout)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return EXIT_INVALID_INPUT

    generator = ResourceGenerator(config)
    try:
        if args.dry_run:
            artifacts = generator.build_artifacts(args.path)
            print_plan([(a.relative_path, a.byte_size) for a in artifacts])
            return EXIT_OK
        report = generator.generate(args.path)
    except FilesystemError as exc:
        if exc.report is not None and len(exc.report):
            console.print("Files written before the failure:")
            print_report(exc.report)
        print_error(f"Error: {exc}")
        return EXIT_FILESYSTEM
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return EXIT_INVALID_INPUT

    print_report(report)
    print_success(f"{len(report)} files generated ({report.total_bytes} bytes)")
    return EXIT_OK


def main() -> None:
    """CLI entry point for ``resgen`` / ``python -m src.cli``."""
    sys.exit(run())


def resource_cli() -> None:
    """Fixed-layout entry point: colocated module with a service layer."""
    sys.exit(run(fixed_layout=LayoutMode.COLOCATED_WITH_SERVICE))


def split_cli() -> None:
    """Fixed-layout entry point: routes/ and modules/ trees."""
    sys.exit(run(fixed_layout=LayoutMode.SPLIT_ROUTE_MODULE))


def basic_cli() -> None:
    """Fixed-layout entry point: colocated module without a service layer."""
    sys.exit(run(fixed_layout=LayoutMode.COLOCATED_WITHOUT_SERVICE))


if __name__ == "__main__":
    main()
