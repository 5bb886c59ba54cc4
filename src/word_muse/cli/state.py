from typing import Optional

import click
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from word_muse.adapters.datamuse import DATAMUSE_URL, DEFAULT_TIMEOUT


class AppState(BaseSettings):
    """Persistent application state."""

    model_config = SettingsConfigDict(env_prefix="WORD_MUSE_")

    url: str = DATAMUSE_URL
    limit: Optional[int] = None
    timeout: float = DEFAULT_TIMEOUT
    output: str = "table"
    quiet: bool = False
    debug: bool = False


pass_state = click.make_pass_decorator(AppState, ensure=True)


class ConfigurationState(BaseModel):
    """The current state of configuration file settings."""

    model_config = ConfigDict(extra="forbid")

    url: Optional[str] = None
    limit: Optional[int] = None
    timeout: float = DEFAULT_TIMEOUT
    output: str = "table"
    quiet: bool = False
