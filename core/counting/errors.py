"""
Counting Errors - Error taxonomy cho counting pipeline.

- FileReadError: file khong ton tai, khong doc duoc, hoac khong phai UTF-8
- WorkerAbortedError: parallel worker ket thuc bat thuong (defect, khong phai I/O)
"""

from pathlib import Path
from typing import Union


class CountingError(Exception):
    """Base error cho counting operations."""

    pass


class FileReadError(CountingError):
    """Khong doc duoc file duoi dang UTF-8 text."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class WorkerAbortedError(CountingError):
    """Parallel worker ket thuc ma khong tra ve ket qua hop le."""

    def __init__(self, chunk_index: int, cause: BaseException):
        self.chunk_index = chunk_index
        self.cause = cause
        super().__init__(
            f"worker for chunk {chunk_index} aborted: {type(cause).__name__}: {cause}"
        )
