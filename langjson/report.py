"""Generate summary reports for conversion runs."""

from typing import Dict, Any


READ_FAILURES_LABEL = "Failed to read:"
WRITE_FAILURES_LABEL = "Failed to write:"
SUCCESS_MESSAGE = "All files were processed successfully."


def generate_summary_report(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Generate a summary report for a conversion run.

    Args:
        result: Result dictionary from convert_directory

    Returns:
        Dictionary with report data:
        {
            "mode": str,
            "converted": int,
            "read_failures": [(stem, message), ...],
            "write_failures": [(stem, message), ...],
            "success": bool
        }
    """
    read_failures = list(result.get("failed_reads", []))
    write_failures = list(result.get("failed_writes", []))

    return {
        "mode": result.get("mode"),
        "converted": len(result.get("converted", [])),
        "read_failures": read_failures,
        "write_failures": write_failures,
        "success": not read_failures and not write_failures,
    }


def print_summary_report(report: Dict[str, Any]) -> None:
    """
    Print a formatted summary report.

    Args:
        report: Report dictionary from generate_summary_report
    """
    print("\nConversion complete:")

    if report["success"]:
        print(SUCCESS_MESSAGE)
        return

    if report["read_failures"]:
        print(f"\n{READ_FAILURES_LABEL}")
        for stem, message in report["read_failures"]:
            print(f"- {stem}: {message}")

    if report["write_failures"]:
        print(f"\n{WRITE_FAILURES_LABEL}")
        for stem, message in report["write_failures"]:
            print(f"- {stem}: {message}")
