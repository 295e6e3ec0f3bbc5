"""Config model."""

from __future__ import annotations

from pydantic import Field, constr

from .base import SlidesBaseModel

NonEmptyStr = constr(min_length=1)


class Config(SlidesBaseModel):
    project_root: NonEmptyStr = Field(..., description="Project root directory")
    assets_dir: NonEmptyStr = Field(..., description="Image assets directory")
    inputs_dir: NonEmptyStr = Field(..., description="Inputs directory")
    runs_dir: NonEmptyStr = Field(..., description="Runs output directory")
    sample_document_path: NonEmptyStr = Field(..., description="Smoke-test Markdown document")
