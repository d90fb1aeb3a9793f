"""Application settings loaded from the environment and an optional TOML file."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_paginglinks.pagination import OffsetLimitPagination, PageNumberPagination

DEFAULT_ADDRESS = ":2697"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAGINGLINKS_", case_sensitive=False, extra="ignore")

    address: str = Field(default=DEFAULT_ADDRESS)

    # Query parameter names
    page_param: str = Field(default="page")
    offset_param: str = Field(default="offset")
    limit_param: str = Field(default="limit")

    page_size: int = Field(default=50, gt=0)

    def page_number_pagination(self) -> PageNumberPagination:
        return PageNumberPagination(page_param=self.page_param)

    def offset_limit_pagination(self) -> OffsetLimitPagination:
        return OffsetLimitPagination(
            offset_param=self.offset_param,
            limit_param=self.limit_param,
            page_size=self.page_size,
        )


def load_settings(path: str | Path | None = None) -> Settings:
    """Return settings, with values from the TOML file at ``path`` taking precedence.

    An empty or missing ``path`` returns the defaults (plus environment overrides).
    """
    if not path:
        return get_settings()

    with Path(path).expanduser().open("rb") as f:
        data: dict[str, Any] = tomllib.load(f)
    return Settings(**data)


@lru_cache
def get_settings() -> Settings:
    return Settings()
