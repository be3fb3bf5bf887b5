from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import (
    DEFAULT_CLONE_ROOT,
    DEFAULT_COMMENT_MARKER,
    DEFAULT_GH_BIN,
    DEFAULT_GIT_BIN,
)

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (MYGIT_* env or .env)."""

    model_config = SettingsConfigDict(env_prefix="MYGIT_", env_file=None, extra="ignore")

    # MYGIT_EDITOR wins, otherwise the conventional EDITOR
    editor: str | None = Field(default_factory=lambda: os.getenv("EDITOR") or None)
    git_bin: str = Field(default=DEFAULT_GIT_BIN)
    gh_bin: str = Field(default=DEFAULT_GH_BIN)
    clone_root: str = Field(default=DEFAULT_CLONE_ROOT)
    comment_marker: str = Field(default=DEFAULT_COMMENT_MARKER, min_length=1)
    debug: bool = Field(default=False)


def get_settings() -> Settings:
    # constructed per invocation; nothing is cached between runs
    return Settings()
