"""
Unit tests cho config/counting_config.py.
"""

from config.counting_config import (
    DEFAULT_MATCH_CHARS,
    DEFAULT_WORKER_COUNT,
    WORKERS_ENV_VAR,
    CountingConfig,
    get_worker_count,
)


class TestGetWorkerCount:
    """Test doc worker count tu environment."""

    def test_default_khi_khong_set(self):
        """Khong co env var -> DEFAULT_WORKER_COUNT."""
        assert get_worker_count({}) == DEFAULT_WORKER_COUNT

    def test_override(self):
        """Env var hop le duoc dung."""
        assert get_worker_count({WORKERS_ENV_VAR: "3"}) == 3

    def test_invalid_value_fallback(self):
        """Gia tri khong phai so -> default."""
        assert get_worker_count({WORKERS_ENV_VAR: "many"}) == DEFAULT_WORKER_COUNT

    def test_zero_fallback(self):
        """Gia tri < 1 -> default."""
        assert get_worker_count({WORKERS_ENV_VAR: "0"}) == DEFAULT_WORKER_COUNT

    def test_reads_os_environ(self, monkeypatch):
        """Mac dinh doc tu os.environ."""
        monkeypatch.setenv(WORKERS_ENV_VAR, "5")
        assert get_worker_count() == 5


class TestCountingConfig:
    """Test CountingConfig defaults."""

    def test_defaults(self):
        """Default config dung 8 workers va chars 'ac'."""
        config = CountingConfig()
        assert config.workers == 8
        assert config.match_chars == DEFAULT_MATCH_CHARS == "ac"
        assert config.excluded_patterns == ()
        assert config.use_gitignore is True
