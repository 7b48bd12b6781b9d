"""
Package core.counting - Character counting pipeline.

Modules:
- types: MatchSet builder + CountOutput (immutable)
- errors: CountingError, FileReadError, WorkerAbortedError
- counter: Dem ky tu trong text va trong 1 file
- partition: Chia FileList thanh cac chunk lien tiep
- batch: Sequential va parallel aggregation (co timing)
"""

from core.counting.batch import count_files_parallel, count_files_sequential
from core.counting.counter import count_chars, count_chars_in_file
from core.counting.errors import CountingError, FileReadError, WorkerAbortedError
from core.counting.partition import chunk_paths
from core.counting.types import CountOutput, MatchSet, build_match_set

__all__ = [
    "CountOutput",
    "CountingError",
    "FileReadError",
    "MatchSet",
    "WorkerAbortedError",
    "build_match_set",
    "chunk_paths",
    "count_chars",
    "count_chars_in_file",
    "count_files_parallel",
    "count_files_sequential",
]
