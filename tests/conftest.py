from typing import Generator

import pytest

from config import config


@pytest.fixture(autouse=True)
def _reset_config_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in ("PROVIDENT_BASE_URL", "SPOT_CURRENCY", "HTTP_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config.cache_clear()
    yield
    config.cache_clear()
