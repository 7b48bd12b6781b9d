"""
Counting Types - Cac kieu du lieu dung chung cho counting pipeline.

Cung cap:
- MatchSet: Tuple cac ky tu don (distinct, giu thu tu)
- build_match_set(): Validate va tao MatchSet
- CountOutput: Ket qua (counts, elapsed microseconds)
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

MatchSet = Tuple[str, ...]


def build_match_set(chars: Iterable[str]) -> MatchSet:
    """
    Tao MatchSet tu mot iterable cac ky tu.

    - Moi member phai la dung 1 ky tu (1 Unicode scalar value)
    - Bo duplicates, giu thu tu xuat hien dau tien
    - MatchSet rong khong hop le

    Args:
        chars: String hoac iterable cac string 1 ky tu

    Returns:
        Tuple cac ky tu distinct

    Raises:
        ValueError: Member khong phai 1 ky tu, hoac ket qua rong
    """
    seen = []
    for ch in chars:
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"Match-set members must be single characters, got {ch!r}")
        if ch not in seen:
            seen.append(ch)

    if not seen:
        raise ValueError("Match-set must contain at least one character")

    return tuple(seen)


@dataclass(frozen=True, slots=True)
class CountOutput:
    """
    Ket qua cua mot lan dem tren nhieu files.

    Immutable (frozen). Hai CountOutput bang nhau khi ca counts va elapsed
    deu bang nhau, nen tests chi nen so sanh `counts`.

    Attributes:
        counts: Tong so ky tu match (>= 0)
        elapsed: Thoi gian wall-clock, tinh bang microseconds (>= 0)
    """

    counts: int
    elapsed: int
