from __future__ import annotations

import pytest

from fastapi_paginglinks.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ('ADDRESS', 'PAGE_PARAM', 'OFFSET_PARAM', 'LIMIT_PARAM', 'PAGE_SIZE'):
        monkeypatch.delenv(f'PAGINGLINKS_{name}', raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
