from pathlib import Path
from typing import List
import json

# utf-8-sig drops a leading byte order mark and reads plain UTF-8 unchanged
TEXT_ENCODING = "utf-8-sig"

def _ensure_exists(path: Path):
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")

def read_json(path: Path):
    _ensure_exists(path)
    with open(path, "r", encoding=TEXT_ENCODING) as f:
        return json.load(f)

def read_lines(path: Path) -> List[str]:
    """
    Read a text file as a list of lines without their line endings.
    Only \\n, \\r\\n and \\r end a line; other separators such as form feeds stay in the text.
    """
    _ensure_exists(path)
    with open(path, "r", encoding=TEXT_ENCODING) as f:
        return [line.rstrip("\r\n") for line in f]
