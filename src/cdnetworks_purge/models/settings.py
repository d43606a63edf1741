from pathlib import Path

import dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://ngapi.cdnetworks.com"


class EnvSettings(BaseSettings):
    api_url: str = DEFAULT_API_URL

    # seconds, per request
    timeout: float = 30.0

    # github actions runner files
    github_output: Path | None = Field(default=None, validation_alias="GITHUB_OUTPUT")
    github_step_summary: Path | None = Field(
        default=None, validation_alias="GITHUB_STEP_SUMMARY"
    )

    # debug
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True),
        env_prefix="cdn_purge_",
        extra="ignore",
    )


env = EnvSettings()
