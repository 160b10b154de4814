from __future__ import annotations
import os, shutil
from pathlib import Path


def remove_entry(path: str | Path) -> None:
    """Remove whatever occupies ``path``. Symlinks are unlinked, never followed."""
    p = Path(path)
    if p.is_symlink() or not p.is_dir():
        p.unlink()
    else:
        shutil.rmtree(p)


def read_link(path: str | Path) -> str | None:
    """Raw value of a symlink, or None when ``path`` is not a readable link."""
    try:
        return os.readlink(path)
    except OSError:
        return None


def make_link(source: str | Path, link: str | Path) -> None:
    os.symlink(str(source), str(link), target_is_directory=True)
