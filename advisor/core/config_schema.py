"""
Configuration Schemas.

Pydantic models defining the expected structure of the `.advisor` settings
file. If the file has missing keys, wrong types, or unknown fields, a clear
ValidationError is raised at load time instead of a cryptic KeyError later.

    apps:
      - name: staging
        location: https://advisor.staging.example.com
        token: s3cr3t
    default: staging
    selection: auto
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


class Selection(str, Enum):
    """How an app is chosen when `--app` is not given."""

    EXPLICIT = "explicit"
    DEFAULT = "default"
    AUTO = "auto"


class AppSchema(_StrictBase):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    token: str | None = None


class AdvisorFileSchema(_StrictBase):
    apps: list[AppSchema] = Field(default_factory=list)
    default: str | None = None
    selection: Selection = Selection.AUTO

    @model_validator(mode="after")
    def _unique_names(self) -> "AdvisorFileSchema":
        seen: set[str] = set()
        for app in self.apps:
            if app.name in seen:
                raise ValueError(f"duplicate app name: {app.name!r}")
            seen.add(app.name)
        return self
