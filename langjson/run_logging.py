"""Per-run logging for batch conversions."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, Optional


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class RunLogger:
    """Logger for conversion runs."""

    def __init__(self, runs_dir: Path, run_id: Optional[str] = None):
        """
        Initialize run logger.

        Args:
            runs_dir: Base directory for run logs (e.g., work/runs)
            run_id: Optional run ID. If None, generates a new UUID.
        """
        self.runs_dir = runs_dir
        self.run_id = run_id or str(uuid.uuid4())
        self.run_dir = runs_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=True)

        self.conversions_file = self.run_dir / "conversions.jsonl"
        self.failures_file = self.run_dir / "failures.jsonl"
        self.summary_file = self.run_dir / "summary.json"

        self.summary = {
            "run_id": self.run_id,
            "started_at": _timestamp(),
            "completed_at": None,
            "mode": None,
            "input_dir": None,
            "output_dir": None,
            "files_converted": 0,
            "read_failures": 0,
            "write_failures": 0,
        }

    def _append(self, file_path: Path, record: Dict[str, Any]) -> None:
        with open(file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    def log_conversion(self, input_file: Path, output_file: Path, entries: int) -> None:
        """
        Log a successfully converted file.

        Args:
            input_file: Source file
            output_file: Written file
            entries: Number of records written
        """
        self._append(self.conversions_file, {
            "timestamp": _timestamp(),
            "input": str(input_file),
            "output": str(output_file),
            "entries": entries,
        })

    def log_failure(
        self,
        stem: str,
        error_type: str,
        error_message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a file that could not be converted.

        Args:
            stem: File name without extension
            error_type: "read_error" or "write_error"
            error_message: Error message
            context: Optional context dictionary
        """
        self._append(self.failures_file, {
            "timestamp": _timestamp(),
            "stem": stem,
            "error_type": error_type,
            "error_message": error_message,
            "context": context or {},
        })

    def update_summary(self, **fields: Any) -> None:
        """Update summary fields; unknown fields are rejected."""
        for name, value in fields.items():
            if name not in self.summary:
                raise KeyError(f"Unknown summary field: {name}")
            if value is not None:
                self.summary[name] = value

    def finalize(self) -> None:
        """Finalize the run and write summary."""
        self.summary["completed_at"] = _timestamp()

        with open(self.summary_file, "w", encoding="utf-8") as f:
            json.dump(self.summary, f, ensure_ascii=False, indent=2)

    def get_summary(self) -> Dict[str, Any]:
        """Get current summary."""
        return self.summary.copy()
