"""
Config Package - Chua cac constants va cau hinh cua ung dung

Bao gom:
- paths: App directories va debug env var
- counting_config: Worker count va match chars mac dinh
"""

from config.counting_config import (
    CountingConfig,
    DEFAULT_WORKER_COUNT,
    DEFAULT_MATCH_CHARS,
    WORKERS_ENV_VAR,
    get_worker_count,
)

__all__ = [
    "CountingConfig",
    "DEFAULT_WORKER_COUNT",
    "DEFAULT_MATCH_CHARS",
    "WORKERS_ENV_VAR",
    "get_worker_count",
]
