"""Tests for conversion summary reports."""

from langjson.report import generate_summary_report, print_summary_report


def test_generate_summary_report_success():
    """Test report for a run without failures."""
    report = generate_summary_report({
        "mode": "both",
        "converted": [("input/a.lang", "output/a.json")],
        "failed_reads": [],
        "failed_writes": [],
    })
    
    assert report["success"] is True
    assert report["converted"] == 1
    assert report["mode"] == "both"


def test_print_summary_report_success(capsys):
    """Test that a clean run prints a single success line."""
    report = generate_summary_report({"mode": "lang2json", "converted": []})
    
    print_summary_report(report)
    
    out = capsys.readouterr().out
    assert "All files were processed successfully." in out
    assert "Failed" not in out


def test_print_summary_report_failures_in_order(capsys):
    """Test that failures are listed under their label in insertion order."""
    report = generate_summary_report({
        "mode": "both",
        "converted": [],
        "failed_reads": [("b", "bad json"), ("a", "not found")],
        "failed_writes": [("c", "permission denied")],
    })
    
    print_summary_report(report)
    
    out = capsys.readouterr().out
    assert report["success"] is False
    assert "Failed to read:" in out
    assert "Failed to write:" in out
    assert out.index("- b: bad json") < out.index("- a: not found")
    assert out.index("Failed to read:") < out.index("Failed to write:") < out.index("- c: permission denied")
    assert "successfully" not in out


def test_print_summary_report_only_write_failures(capsys):
    """Test that an empty failure log is not printed."""
    report = generate_summary_report({
        "failed_reads": [],
        "failed_writes": [("c", "permission denied")],
    })
    
    print_summary_report(report)
    
    out = capsys.readouterr().out
    assert "Failed to read:" not in out
    assert "- c: permission denied" in out
