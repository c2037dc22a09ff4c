"""Batch conversion between .lang and JSON localization files."""

from pathlib import Path
from typing import Callable, Dict, Any, List, Optional, Tuple

from langjson.errors import ReadError, WriteError
from langjson.io_json import read_json_file, write_json_file
from langjson.io_lang import read_lang_file, write_lang_file
from langjson.records import RecordStore
from langjson.run_logging import RunLogger


MODE_LANG_TO_JSON = "lang2json"
MODE_JSON_TO_LANG = "json2lang"
MODE_BOTH = "both"

MODES = (MODE_LANG_TO_JSON, MODE_JSON_TO_LANG, MODE_BOTH)

Reader = Callable[[Path], RecordStore]
Writer = Callable[[Path, RecordStore], None]

# source suffix -> (reader, writer, target suffix)
LANG_TO_JSON: Tuple[Reader, Writer, str] = (read_lang_file, write_json_file, ".json")
JSON_TO_LANG: Tuple[Reader, Writer, str] = (read_json_file, write_lang_file, ".lang")

ROUTES: Dict[str, Dict[str, Tuple[Reader, Writer, str]]] = {
    MODE_LANG_TO_JSON: {".lang": LANG_TO_JSON},
    MODE_JSON_TO_LANG: {".json": JSON_TO_LANG},
    MODE_BOTH: {".lang": LANG_TO_JSON, ".json": JSON_TO_LANG},
}


def output_path_for(input_file: Path, output_dir: Path, target_suffix: str) -> Path:
    """Return <output_dir>/<stem><target_suffix> for an input file."""
    return output_dir / f"{input_file.stem}{target_suffix}"


def list_input_files(input_dir: Path) -> List[Path]:
    """
    Snapshot the regular files of the input directory.

    Subdirectories and entries that cannot be inspected are skipped.

    Raises:
        FileNotFoundError: If the input directory does not exist
    """
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    files = []
    for entry in list(input_dir.iterdir()):
        try:
            if entry.is_file():
                files.append(entry)
        except OSError:
            continue
    return files


def convert_directory(
    input_dir: Path,
    output_dir: Path,
    mode: str,
    logger: Optional[RunLogger] = None
) -> Dict[str, Any]:
    """
    Convert every matching file of input_dir into output_dir.

    Files are processed one at a time in directory order. A file that
    cannot be read is recorded in failed_reads and never written; a file
    that cannot be written is recorded in failed_writes. Neither stops
    the batch.

    Args:
        input_dir: Directory holding the source files
        output_dir: Directory receiving the converted files
        mode: One of "lang2json", "json2lang" or "both"
        logger: Optional run logger

    Returns:
        Dictionary with results:
        {
            "mode": str,
            "input_dir": str,
            "output_dir": str,
            "converted": [(input_path, output_path), ...],
            "failed_reads": [(stem, message), ...],
            "failed_writes": [(stem, message), ...]
        }

    Raises:
        ValueError: If mode is unknown
        FileNotFoundError: If input_dir does not exist
    """
    if mode not in ROUTES:
        raise ValueError(f"Unknown mode: {mode} (expected one of {', '.join(MODES)})")

    routes = ROUTES[mode]

    result: Dict[str, Any] = {
        "mode": mode,
        "input_dir": str(input_dir),
        "output_dir": str(output_dir),
        "converted": [],
        "failed_reads": [],
        "failed_writes": [],
    }

    for input_file in list_input_files(input_dir):
        route = routes.get(input_file.suffix)
        if route is None:
            continue

        reader, writer, target_suffix = route
        stem = input_file.stem
        output_file = output_path_for(input_file, output_dir, target_suffix)

        try:
            store = reader(input_file)
        except ReadError as e:
            result["failed_reads"].append((stem, e.message))
            if logger:
                logger.log_failure(stem, "read_error", e.message, {"input": str(input_file)})
            continue

        try:
            writer(output_file, store)
        except WriteError as e:
            result["failed_writes"].append((stem, e.message))
            if logger:
                logger.log_failure(stem, "write_error", e.message, {"output": str(output_file)})
            continue

        print(f"{input_file} => {output_file}")
        result["converted"].append((str(input_file), str(output_file)))
        if logger:
            logger.log_conversion(input_file, output_file, len(store))

    if logger:
        logger.update_summary(
            mode=mode,
            input_dir=str(input_dir),
            output_dir=str(output_dir),
            files_converted=len(result["converted"]),
            read_failures=len(result["failed_reads"]),
            write_failures=len(result["failed_writes"])
        )

    return result
