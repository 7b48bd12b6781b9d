"""
Batch/parallel character counting.

Functions:
- count_files_sequential(): Dem tuan tu tren caller thread
- count_files_parallel(): ThreadPoolExecutor, 1 task moi chunk
- _count_chunk(): Reduction cua 1 chunk (chay trong worker)

AN TOAN RACE CONDITION:
- Moi worker so huu chunk rieng va MatchSet immutable
- Khong co shared mutable state giua workers
- Reduction (sum) chi chay tren orchestrator sau khi TAT CA workers xong
"""

import time
from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Iterable, List, Sequence

from config.counting_config import DEFAULT_WORKER_COUNT
from core.counting.counter import PathLike, count_chars_in_file
from core.counting.errors import FileReadError, WorkerAbortedError
from core.counting.partition import chunk_paths
from core.counting.types import CountOutput, MatchSet
from core.logging_config import log_debug


def _elapsed_micros(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1000


def _count_chunk(file_paths: Sequence[PathLike], match_set: MatchSet) -> int:
    """
    Dem tuan tu cac files trong 1 chunk va tra ve partial sum.

    Fail-fast: loi dau tien propagate ngay, khong tra ve partial sum.
    """
    total = 0
    for path in file_paths:
        total += count_chars_in_file(path, match_set)
    return total


def count_files_sequential(
    file_paths: Sequence[PathLike], match_set: Iterable[str]
) -> CountOutput:
    """
    Dem ky tu tren nhieu files, tuan tu tren caller thread.

    Args:
        file_paths: Danh sach files theo thu tu
        match_set: Cac ky tu can dem

    Returns:
        CountOutput(counts, elapsed microseconds)

    Raises:
        FileReadError: File dau tien doc that bai (khong co partial result)
    """
    start_ns = time.perf_counter_ns()

    counts = _count_chunk(file_paths, tuple(match_set))

    elapsed = _elapsed_micros(start_ns)
    log_debug(f"[Counter] sequential: {len(file_paths)} files, {counts} matches, {elapsed} us")
    return CountOutput(counts=counts, elapsed=elapsed)


def count_files_parallel(
    file_paths: Sequence[PathLike],
    match_set: Iterable[str],
    workers: int = DEFAULT_WORKER_COUNT,
) -> CountOutput:
    """
    Dem ky tu tren nhieu files song song voi ThreadPoolExecutor.

    Fan-out: moi chunk (tu chunk_paths) chay tren 1 worker rieng.
    Fan-in: cho TAT CA workers xong (khong timeout), roi cong partial sums.

    Loi trong worker:
    - FileReadError -> re-raise nguyen ven cho caller
    - Exception khac (defect) -> WorkerAbortedError
    Trong ca hai truong hop partial sums da tinh deu bi bo.

    Args:
        file_paths: Danh sach files theo thu tu
        match_set: Cac ky tu can dem
        workers: So workers toi da (default 8)

    Returns:
        CountOutput(counts, elapsed microseconds)

    Raises:
        FileReadError: Mot file trong bat ky chunk nao doc that bai
        WorkerAbortedError: Worker ket thuc bat thuong
        ValueError: workers < 1
    """
    start_ns = time.perf_counter_ns()

    chunks = chunk_paths(file_paths, workers)
    if not chunks:
        return CountOutput(counts=0, elapsed=_elapsed_micros(start_ns))

    frozen_match_set: MatchSet = tuple(match_set)
    log_debug(
        f"[Counter] parallel: {len(file_paths)} files in {len(chunks)} chunks "
        f"(size <= {len(chunks[0])})"
    )

    with ThreadPoolExecutor(
        max_workers=len(chunks), thread_name_prefix="fasty-worker"
    ) as executor:
        futures: List[Future] = [
            executor.submit(_count_chunk, chunk, frozen_match_set) for chunk in chunks
        ]
        wait(futures, return_when=ALL_COMPLETED)

    counts = 0
    for index, future in enumerate(futures):
        exc = future.exception()
        if exc is None:
            counts += future.result()
            continue

        if isinstance(exc, FileReadError):
            log_debug(f"[Counter] chunk {index} failed: {exc}")
            raise exc

        log_debug(f"[Counter] worker for chunk {index} aborted: {exc!r}")
        raise WorkerAbortedError(index, exc) from exc

    elapsed = _elapsed_micros(start_ns)
    log_debug(f"[Counter] parallel: {counts} matches, {elapsed} us")
    return CountOutput(counts=counts, elapsed=elapsed)
