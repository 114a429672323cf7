import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from complexity_cli.core.logging import log_file_operation, log_warning

JsonData = Union[List, Dict]


def load_json(file_path: Union[str, Path], default: Optional[JsonData] = None) -> JsonData:
    """
    Read a JSON file.

    A missing or unparsable file yields ``default`` (an empty dict when not
    given); a parse error is logged as a warning.
    """
    fallback = default if default is not None else {}
    path = Path(file_path)
    if not path.exists():
        return fallback

    log_file_operation("read", path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        log_warning(f"Ignoring malformed JSON in {path}: {e}")
        return fallback


def save_json(file_path: Union[str, Path], data: JsonData) -> Path:
    """
    Write ``data`` as indented UTF-8 JSON, creating parent directories.

    Returns:
        The written path
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    log_file_operation("write", path)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
