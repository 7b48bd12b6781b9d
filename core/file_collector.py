"""
File Collector - Bien CLI arguments (files va directories) thanh FileList.

- File arguments duoc giu nguyen, dung thu tu (ke ca file khong ton tai,
  de counting bao loi thay vi bo qua im lang)
- Directory arguments duoc walk recursive, sorted, loc qua ignore engine
"""

import os
from pathlib import Path
from typing import List, Optional, Sequence, Union

from core.ignore_engine import build_pathspec
from core.logging_config import log_debug


def _walk_directory(
    root: Path,
    excluded_patterns: Optional[Sequence[str]],
    use_gitignore: bool,
) -> List[str]:
    spec = build_pathspec(
        root, excluded_patterns=excluded_patterns, use_gitignore=use_gitignore
    )
    files: List[str] = []

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root)

        # Prune ignored directories truoc khi os.walk di xuong
        dirnames[:] = sorted(
            d
            for d in dirnames
            if not spec.match_file((rel_dir / d).as_posix() + "/")
        )

        for name in sorted(filenames):
            if spec.match_file((rel_dir / name).as_posix()):
                continue
            files.append(str(Path(dirpath) / name))

    return files


def collect_paths(
    inputs: Sequence[Union[str, os.PathLike]],
    excluded_patterns: Optional[Sequence[str]] = None,
    use_gitignore: bool = True,
) -> List[str]:
    """
    Thu thap FileList tu danh sach files/directories.

    Args:
        inputs: Paths tu CLI (file hoac directory)
        excluded_patterns: Gitignore-style patterns ap dung khi walk directory
        use_gitignore: Co ap dung .gitignore cua directory duoc walk khong

    Returns:
        List path strings theo thu tu: tung input, directory contents sorted
    """
    collected: List[str] = []

    for raw in inputs:
        path = Path(raw)
        if path.is_dir():
            found = _walk_directory(path, excluded_patterns, use_gitignore)
            log_debug(f"[Collector] {path}: {len(found)} files")
            collected.extend(found)
        else:
            collected.append(os.fspath(raw))

    return collected
