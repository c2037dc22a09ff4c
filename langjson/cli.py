"""CLI entrypoint."""

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from langjson.convert import (
    MODES,
    MODE_BOTH,
    MODE_JSON_TO_LANG,
    MODE_LANG_TO_JSON,
    convert_directory,
)
from langjson.report import generate_summary_report, print_summary_report
from langjson.run_logging import RunLogger


MENU = "\n1: lang=>json\n2: json=>lang\n3: convert both\n0: exit"
MENU_CHOICES = {
    "1": MODE_LANG_TO_JSON,
    "2": MODE_JSON_TO_LANG,
    "3": MODE_BOTH,
}
EXIT_CHOICE = "0"
USAGE = (
    "Invalid choice. Enter 0 (exit), 1 (lang=>json), "
    "2 (json=>lang) or 3 (convert both).\n"
)


def ensure_directories(input_dir: Path, output_dir: Path) -> List[Path]:
    """
    Create the input and output directories when missing.

    Args:
        input_dir: Directory holding the source files
        output_dir: Directory receiving the converted files

    Returns:
        Directories that were created
    """
    created = []
    for directory in (input_dir, output_dir):
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            print(f"Created directory: {directory}")
            created.append(directory)
    return created


def run_batch(
    input_dir: Path,
    output_dir: Path,
    mode: str,
    runs_dir: Optional[Path] = None
) -> bool:
    """
    Run one batch conversion and print its summary.

    Returns:
        True if every selected file was converted
    """
    logger = RunLogger(runs_dir) if runs_dir else None

    result = convert_directory(input_dir, output_dir, mode, logger=logger)

    if logger:
        logger.finalize()

    report = generate_summary_report(result)
    print_summary_report(report)

    if logger:
        print(f"  Logs: {logger.run_dir}")

    return report["success"]


def prompt_for_mode(input_fn: Optional[Callable[[str], str]] = None) -> Optional[str]:
    """
    Prompt until a valid menu choice is entered.

    Returns:
        The selected mode, or None when the operator chose to exit
    """
    if input_fn is None:
        input_fn = input

    while True:
        print(MENU)
        try:
            choice = input_fn("Select an option: ").strip()
        except EOFError:
            return None

        if choice == EXIT_CHOICE:
            return None
        if choice in MENU_CHOICES:
            return MENU_CHOICES[choice]
        print(USAGE)


def run_menu(
    input_dir: Path,
    output_dir: Path,
    runs_dir: Optional[Path] = None,
    input_fn: Optional[Callable[[str], str]] = None
) -> None:
    """Show the menu and run the selected conversion until exit is chosen."""
    while True:
        mode = prompt_for_mode(input_fn)
        if mode is None:
            print("Exiting.")
            return

        try:
            run_batch(input_dir, output_dir, mode, runs_dir)
        except OSError as e:
            print(f"✗ Error: {e}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Convert localization files between .lang and JSON"
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path(os.getenv("LANGJSON_INPUT_DIR", "input")),
        help="Directory containing source files (default: LANGJSON_INPUT_DIR or input)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(os.getenv("LANGJSON_OUTPUT_DIR", "output")),
        help="Directory for converted files (default: LANGJSON_OUTPUT_DIR or output)"
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        help="Run a single conversion and exit instead of showing the menu"
    )
    parser.add_argument(
        "--runs-dir",
        type=Path,
        help="Directory for run logs (e.g., work/runs); disabled when omitted"
    )

    args = parser.parse_args(argv)

    try:
        ensure_directories(args.input_dir, args.output_dir)
    except OSError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.mode:
        try:
            success = run_batch(args.input_dir, args.output_dir, args.mode, args.runs_dir)
        except OSError as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            sys.exit(1)

        if not success:
            sys.exit(1)
        print("✓ Conversion complete")
        return

    run_menu(args.input_dir, args.output_dir, args.runs_dir)
    sys.exit(0)


if __name__ == "__main__":
    main()
