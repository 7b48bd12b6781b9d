"""
Work partitioning cho parallel counting.

chunk_paths() chia FileList thanh cac chunk lien tiep, kich thuoc
ceil(N / workers), nen khong bao gio co qua `workers` chunks.
"""

from typing import List, Sequence, TypeVar

from config.counting_config import DEFAULT_WORKER_COUNT

T = TypeVar("T")


def chunk_paths(items: Sequence[T], workers: int = DEFAULT_WORKER_COUNT) -> List[List[T]]:
    """
    Chia items thanh cac chunk lien tiep.

    - chunk_size = ceil(N / workers), chunk cuoi co the nho hon
    - N = 0 -> khong co chunk nao
    - N < workers -> N chunks, moi chunk 1 item (khong co chunk rong)

    Args:
        items: Danh sach can chia (thuong la file paths)
        workers: So workers toi da

    Returns:
        List cac chunk; noi lai theo thu tu bang dung items

    Raises:
        ValueError: workers < 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    total = len(items)
    if total == 0:
        return []

    # ceil(total / workers)
    chunk_size = (total + workers - 1) // workers
    return [list(items[i : i + chunk_size]) for i in range(0, total, chunk_size)]
