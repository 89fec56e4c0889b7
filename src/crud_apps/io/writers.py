from pathlib import Path
from typing import Iterable
import json

def _atomic_write(out: Path, text: str) -> None:
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(out)             # atomic replace on same filesystem

def atomic_write_lines(lines: Iterable[str], out: Path) -> None:
    _atomic_write(out, "".join(f"{line}\n" for line in lines))

def atomic_write_json(data, out: Path, indent: int = 2) -> None:
    _atomic_write(out, json.dumps(data, indent=indent, ensure_ascii=False) + "\n")
