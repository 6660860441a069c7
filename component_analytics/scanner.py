"""
File scanner for component analytics.
Handles file discovery and safe reading.
"""

from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import DEFAULT_EXTENSIONS, IGNORE_PATTERNS


def should_ignore(rel_path: str, patterns: Sequence[str] = IGNORE_PATTERNS) -> bool:
    """Check if path should be ignored."""
    return any(pattern in rel_path for pattern in patterns)


def read_content(path: Path, log: Callable[[str], None] = lambda x: None) -> Optional[str]:
    """Read file content, None if it can't be read."""
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        log(f"Skipped: {path} ({e.__class__.__name__}: {e})")
        return None


def find_files(
    root: Path,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ignore_patterns: Sequence[str] = IGNORE_PATTERNS,
    log: Callable[[str], None] = lambda x: None
) -> List[Path]:
    """Find all component files under root, sorted."""
    files = []

    for path in root.rglob('*'):
        if path.suffix not in extensions or not path.is_file():
            continue
        rel_path = path.relative_to(root).as_posix()
        if should_ignore(rel_path, ignore_patterns):
            continue
        files.append(path)
        log(f"Found: {rel_path}")

    return sorted(files)
