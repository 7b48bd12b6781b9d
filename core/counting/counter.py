"""
Core character counting logic.

Functions:
- count_chars(): Dem ky tu thuoc match-set trong text
- count_chars_in_file(): Doc file (strict UTF-8) roi dem
- _read_text_mmap(): Doc file bang mmap, decode strict
"""

import mmap
import os
from pathlib import Path
from typing import Iterable, Union

from core.counting.errors import FileReadError

PathLike = Union[str, os.PathLike]


def count_chars(text: str, match_set: Iterable[str]) -> int:
    """
    Dem so ky tu trong text thuoc match-set.

    Members cua match-set la distinct nen tong cua str.count() tung ky tu
    bang so vi tri match.

    Args:
        text: Text can dem
        match_set: Cac ky tu can dem

    Returns:
        So ky tu match (0 neu match-set rong)
    """
    return sum(text.count(ch) for ch in set(match_set))


def _read_text_mmap(file_path: Path) -> str:
    """
    Doc toan bo file bang mmap va decode UTF-8 (strict).

    File rong khong map duoc, tra ve "" truc tiep.

    Raises:
        OSError: File khong ton tai / khong doc duoc / la directory
        UnicodeDecodeError: Noi dung khong phai UTF-8 hop le
    """
    with open(file_path, "rb") as f:
        if f.seek(0, os.SEEK_END) == 0:
            return ""
        f.seek(0)

        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
            return mm.read().decode("utf-8")


def count_chars_in_file(file_path: PathLike, match_set: Iterable[str]) -> int:
    """
    Dem so ky tu thuoc match-set trong mot file.

    Open failure va read/decode failure deu thanh FileReadError,
    exception goc giu trong __cause__.

    Args:
        file_path: Duong dan file
        match_set: Cac ky tu can dem

    Returns:
        So ky tu match

    Raises:
        FileReadError: File missing, unreadable, hoac invalid UTF-8
    """
    path = Path(file_path)
    try:
        text = _read_text_mmap(path)
    except UnicodeDecodeError as e:
        raise FileReadError(path, f"invalid UTF-8 at byte {e.start}") from e
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    return count_chars(text, match_set)
