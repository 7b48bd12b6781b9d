"""
Counting Configuration - Gia tri mac dinh cho character counting

Worker count co the override qua environment variable FASTY_WORKERS
hoac qua tham so `workers=` khi goi truc tiep cac ham counting.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

# So workers mac dinh cho parallel counting (fan-out toi da)
DEFAULT_WORKER_COUNT = 8

# Ky tu mac dinh can dem khi CLI khong nhan --chars
DEFAULT_MATCH_CHARS = "ac"

# Ten bien moi truong de override worker count
WORKERS_ENV_VAR = "FASTY_WORKERS"


@dataclass(frozen=True)
class CountingConfig:
    """
    Cau hinh cho mot lan chay counting tu CLI.

    Attributes:
        workers: So workers toi da cho parallel mode
        match_chars: Cac ky tu can dem (moi ky tu la mot member)
        excluded_patterns: Patterns (gitignore format) bo qua khi walk directory
        use_gitignore: Co doc .gitignore cua directory duoc walk khong
    """

    workers: int = DEFAULT_WORKER_COUNT
    match_chars: str = DEFAULT_MATCH_CHARS
    excluded_patterns: Tuple[str, ...] = field(default_factory=tuple)
    use_gitignore: bool = True


def get_worker_count(environ: Optional[dict] = None) -> int:
    """
    Doc worker count tu environment, fallback ve DEFAULT_WORKER_COUNT.

    Gia tri khong phai so nguyen hoac < 1 bi bo qua (kem warning).

    Args:
        environ: Mapping env vars (default: os.environ), inject duoc cho tests

    Returns:
        So workers >= 1
    """
    env = os.environ if environ is None else environ
    raw = env.get(WORKERS_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_WORKER_COUNT

    try:
        value = int(raw)
    except ValueError:
        value = 0

    if value < 1:
        from core.logging_config import log_warning

        log_warning(
            f"Ignoring invalid {WORKERS_ENV_VAR}={raw!r}, "
            f"using {DEFAULT_WORKER_COUNT} workers"
        )
        return DEFAULT_WORKER_COUNT

    return value
