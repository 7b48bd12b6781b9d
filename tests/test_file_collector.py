"""
Unit tests cho core/file_collector.py.

Test cac case:
- collect_paths(): Files giu nguyen thu tu, directories walk sorted + ignore
"""

from pathlib import Path

from core.file_collector import collect_paths


def _touch(path: Path, text: str = "a") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestCollectPaths:
    """Test collect_paths()."""

    def test_empty_inputs(self):
        """Khong co input -> list rong."""
        assert collect_paths([]) == []

    def test_files_keep_order(self, tmp_path):
        """File arguments giu dung thu tu truyen vao."""
        b = _touch(tmp_path / "b.txt")
        a = _touch(tmp_path / "a.txt")
        assert collect_paths([str(b), str(a)]) == [str(b), str(a)]

    def test_missing_file_passed_through(self, tmp_path):
        """File khong ton tai van duoc giu (counting se bao loi)."""
        missing = str(tmp_path / "missing.txt")
        assert collect_paths([missing]) == [missing]

    def test_directory_walk_sorted(self, tmp_path):
        """Directory duoc walk recursive, sorted."""
        _touch(tmp_path / "b.txt")
        _touch(tmp_path / "a.txt")
        _touch(tmp_path / "sub" / "c.txt")

        result = collect_paths([tmp_path], use_gitignore=False)
        assert result == [
            str(tmp_path / "a.txt"),
            str(tmp_path / "b.txt"),
            str(tmp_path / "sub" / "c.txt"),
        ]

    def test_vcs_directory_skipped(self, tmp_path):
        """.git directory khong bao gio duoc scan."""
        _touch(tmp_path / ".git" / "HEAD")
        _touch(tmp_path / "a.txt")
        assert collect_paths([tmp_path]) == [str(tmp_path / "a.txt")]

    def test_excluded_patterns(self, tmp_path):
        """User patterns loai files va directories."""
        _touch(tmp_path / "keep.txt")
        _touch(tmp_path / "drop.log")
        _touch(tmp_path / "build" / "out.txt")

        result = collect_paths([tmp_path], excluded_patterns=["*.log", "build/"])
        assert result == [str(tmp_path / "keep.txt")]

    def test_gitignore_applied(self, tmp_path):
        """.gitignore cua directory duoc ap dung."""
        _touch(tmp_path / ".gitignore", "ignored.txt\n")
        _touch(tmp_path / "ignored.txt")
        _touch(tmp_path / "kept.txt")

        result = collect_paths([tmp_path])
        assert str(tmp_path / "ignored.txt") not in result
        assert str(tmp_path / "kept.txt") in result

    def test_gitignore_disabled(self, tmp_path):
        """use_gitignore=False -> file trong .gitignore van duoc lay."""
        _touch(tmp_path / ".gitignore", "ignored.txt\n")
        _touch(tmp_path / "ignored.txt")

        result = collect_paths([tmp_path], use_gitignore=False)
        assert str(tmp_path / "ignored.txt") in result

    def test_mixed_inputs(self, tmp_path):
        """Files va directories tron lan, theo thu tu input."""
        single = _touch(tmp_path / "single.txt")
        folder = tmp_path / "folder"
        _touch(folder / "x.txt")

        result = collect_paths([str(single), str(folder)], use_gitignore=False)
        assert result == [str(single), str(folder / "x.txt")]
