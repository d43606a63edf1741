"""Action inputs."""
from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class InputProvider(Protocol):
    def get_input(self, name: str) -> str:
        """Return the trimmed value of an input, or an empty string."""
        ...


class ActionsInputProvider:
    """Reads inputs the way the GitHub Actions runner passes them."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self.environ = os.environ if environ is None else environ

    @staticmethod
    def env_name(name: str) -> str:
        return f"INPUT_{name.replace(' ', '_').upper()}"

    def get_input(self, name: str) -> str:
        return self.environ.get(self.env_name(name), "").strip()


class MappingInputProvider:
    """Inputs from a plain dict keyed by input name."""

    def __init__(self, values: Mapping[str, str | None]):
        self.values = values

    def get_input(self, name: str) -> str:
        return (self.values.get(name) or "").strip()


class Configuration(BaseModel):
    api_url: str = Field(alias="api-url", default="")
    api_user: str = Field(alias="api-user", default="")
    api_key: SecretStr = Field(alias="api-key", default=SecretStr(""))
    domain_id: str = Field(alias="domain-id", default="")
    on_behalf_of: str = Field(alias="on-behalf-of", default="")
    name: str = ""
    file_headers: str = Field(alias="file-headers", default="")
    action: str = ""
    target: str = ""
    file_urls: str = Field(alias="file-urls", default="")
    dir_urls: str = Field(alias="dir-urls", default="")
    regex_patterns: str = Field(alias="regex-patterns", default="")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def input_names(cls) -> list[str]:
        return [field.alias or name for name, field in cls.model_fields.items()]

    @classmethod
    def from_provider(cls, provider: InputProvider) -> Configuration:
        """Read every known input once."""
        return cls(**{name: provider.get_input(name) for name in cls.input_names()})

    @property
    def secret_key(self) -> str:
        return self.api_key.get_secret_value()
