"""
Unit tests cho core/counting/partition.py (chunk_paths).
"""

import math

import pytest

from config.counting_config import DEFAULT_WORKER_COUNT
from core.counting.partition import chunk_paths


class TestChunkPaths:
    """Test chia FileList thanh chunks lien tiep."""

    def test_empty_list_no_chunks(self):
        """N = 0 -> khong co chunk nao."""
        assert chunk_paths([], 8) == []

    def test_fewer_items_than_workers(self):
        """N < W -> moi item 1 chunk, khong co chunk rong."""
        assert chunk_paths(["a", "b", "c"], 8) == [["a"], ["b"], ["c"]]

    def test_exact_multiple(self):
        """16 files, 8 workers -> 8 chunks x 2."""
        items = [f"{i}.txt" for i in range(16)]
        chunks = chunk_paths(items, 8)
        assert len(chunks) == 8
        assert all(len(c) == 2 for c in chunks)

    def test_last_chunk_smaller(self):
        """11 items, 8 workers -> size 2, chunk cuoi nho hon."""
        chunks = chunk_paths(list(range(11)), 8)
        assert [len(c) for c in chunks] == [2, 2, 2, 2, 2, 1]

    def test_single_worker(self):
        """W = 1 -> 1 chunk chua tat ca."""
        assert chunk_paths([1, 2, 3], 1) == [[1, 2, 3]]

    def test_default_worker_count(self):
        """Default la 8 workers."""
        assert DEFAULT_WORKER_COUNT == 8
        assert len(chunk_paths(list(range(100)))) <= 8

    @pytest.mark.parametrize("workers", [0, -1])
    def test_invalid_workers(self, workers):
        """W < 1 -> ValueError."""
        with pytest.raises(ValueError):
            chunk_paths(["a"], workers)

    def test_properties_over_sizes(self):
        """So chunk <= W, size <= ceil(N/W), noi lai bang input."""
        for workers in (1, 3, 8):
            for n in range(0, 50):
                items = [f"f{i}" for i in range(n)]
                chunks = chunk_paths(items, workers)
                limit = math.ceil(n / workers) if n else 0

                assert len(chunks) <= workers
                assert all(0 < len(c) <= limit for c in chunks)
                assert [x for c in chunks for x in c] == items

    def test_returns_lists_from_tuple(self):
        """Input tuple -> chunks la lists doc lap."""
        chunks = chunk_paths(("a", "b"), 8)
        assert chunks == [["a"], ["b"]]
