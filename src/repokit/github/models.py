from enum import Enum

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"


class GithubUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str


class _HasVisibility(BaseModel):
    model_config = ConfigDict(extra="ignore")

    visibility: Visibility

    @field_validator("visibility", mode="before")
    @classmethod
    def lowercase_visibility(cls, value: object) -> object:
        # gh reports visibility in upper case ("PUBLIC")
        return value.lower() if isinstance(value, str) else value


class RepoSummary(_HasVisibility):
    name: str


class RepoView(_HasVisibility):
    pass


repo_summaries = TypeAdapter(list[RepoSummary])
