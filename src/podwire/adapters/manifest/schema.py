"""Pydantic models for the JSON target manifest."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ManifestTarget(ManifestBaseModel):
    name: str = Field(min_length=1)
    product_basename: str | None = None
    requires_framework: bool = False
    copy_resources_script: str = Field(min_length=1)
    user_project: str = Field(min_length=1)
    user_targets: list[str] = Field(default_factory=list)
    xcconfigs: dict[str, str] = Field(default_factory=dict)

    @field_validator("user_project")
    @classmethod
    def _require_xcodeproj(cls, value: str) -> str:
        if not value.rstrip("/").endswith(".xcodeproj"):
            raise ValueError("user_project must point to an .xcodeproj bundle")
        return value.rstrip("/")


class Manifest(ManifestBaseModel):
    targets: list[ManifestTarget] = Field(default_factory=list)
