from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class PurgeAction(enum.StrEnum):
    DELETE = "delete"
    INVALIDATE = "invalidate"


class PurgeTarget(enum.StrEnum):
    STAGING = "staging"
    PRODUCTION = "production"


class FileHeader(BaseModel):
    name: str
    value: str


class PurgeRequest(BaseModel):
    action: PurgeAction = PurgeAction.INVALIDATE
    target: PurgeTarget
    file_urls: list[str] | None = Field(alias="fileUrls", default=None)
    dir_urls: list[str] | None = Field(alias="dirUrls", default=None)
    regex_patterns: list[str] | None = Field(alias="regexPatterns", default=None)
    name: str | None = None
    file_headers: list[FileHeader] | None = Field(alias="fileHeaders", default=None)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def file_count(self) -> int:
        return len(self.file_urls or ())

    @property
    def dir_count(self) -> int:
        return len(self.dir_urls or ())

    @property
    def regex_count(self) -> int:
        return len(self.regex_patterns or ())

    @property
    def header_count(self) -> int:
        return len(self.file_headers or ())

    def to_json(self) -> str:
        """Serialize as the purge API expects it, dropping unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class PurgeResponse(BaseModel):
    purge_id: str = Field(alias="purgeId")
    status: str
    message: str | None = None

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)
