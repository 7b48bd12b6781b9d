"""
Ignore Engine - Quyet dinh file/folder nao bi bo qua khi walk directory.

Cung cap:
- build_ignore_patterns(): Tap hop patterns tu VCS + user + gitignore
- build_pathspec(): Tao pathspec.PathSpec tu patterns
- read_gitignore(): Doc .gitignore va .git/info/exclude cua mot directory
"""

from pathlib import Path
from typing import List, Optional, Sequence

import pathspec

from core.logging_config import log_warning

# === Cac VCS directories luon bi exclude ===
VCS_DIRS = [".git", ".hg", ".svn"]


def build_ignore_patterns(
    root_path: Path,
    *,
    excluded_patterns: Optional[Sequence[str]] = None,
    use_gitignore: bool = True,
) -> List[str]:
    """
    Tap hop tat ca ignore patterns tu nhieu nguon.

    Thu tu: VCS > User > Gitignore.

    Args:
        root_path: Thu muc goc dang walk
        excluded_patterns: Danh sach patterns tu user (gitignore format)
        use_gitignore: Co doc .gitignore khong (default: True)

    Returns:
        List cac ignore patterns (gitignore format)
    """
    patterns: List[str] = list(VCS_DIRS)

    if excluded_patterns:
        patterns.extend(excluded_patterns)

    if use_gitignore:
        patterns.extend(read_gitignore(root_path))

    return patterns


def build_pathspec(
    root_path: Path,
    *,
    excluded_patterns: Optional[Sequence[str]] = None,
    use_gitignore: bool = True,
) -> pathspec.PathSpec:
    """
    Tao pathspec.PathSpec tu tat ca ignore patterns.

    Args:
        root_path: Thu muc goc dang walk
        excluded_patterns: Danh sach patterns tu user
        use_gitignore: Co doc .gitignore khong

    Returns:
        pathspec.PathSpec object de match relative paths
    """
    patterns = build_ignore_patterns(
        root_path,
        excluded_patterns=excluded_patterns,
        use_gitignore=use_gitignore,
    )
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def read_gitignore(root_path: Path) -> List[str]:
    """
    Doc .gitignore va .git/info/exclude trong root_path.

    File khong doc duoc chi log warning; ignore rules la best-effort,
    con counting errors thi khong bao gio bi nuot.

    Args:
        root_path: Thu muc chua .gitignore

    Returns:
        List cac gitignore patterns (raw lines tu file)
    """
    patterns: List[str] = []

    for candidate in (root_path / ".gitignore", root_path / ".git" / "info" / "exclude"):
        if not candidate.is_file():
            continue
        try:
            content = candidate.read_text(encoding="utf-8", errors="replace")
            patterns.extend(content.splitlines())
        except OSError as e:
            log_warning(f"Could not read {candidate}: {e}")

    return patterns
