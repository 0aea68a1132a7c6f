import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional


def normalize_color(value: str) -> Optional[str]:
    """Pygments-style color normalisation: '#abc' -> '#aabbcc', '' -> None."""
    value = value.strip()
    if not value:
        return None
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) == 3:
            return "#" + "".join(ch * 2 for ch in digits).lower()
        return "#" + digits.lower()
    return value


def sorted_names(names: Iterable[str]) -> List[str]:
    """Sorted, duplicate-free list of names."""
    return sorted(set(names))


def _target_mode(path: Path) -> int:
    # keep the mode of a file being replaced, else what a plain open() would give
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str) -> None:
    """Write text to path through a temp file in the same directory."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
