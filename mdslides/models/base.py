"""Shared Pydantic base model helpers."""

from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict

ModelT = TypeVar("ModelT", bound="SlidesBaseModel")


class SlidesBaseModel(BaseModel):
    """Immutable base model with strict fields and stable JSON output.

    Slides and their classifications are derived from the document text and
    recomputed on change, so instances are frozen rather than edited.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Return a deterministic, JSON-compatible dict (enums as values)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=False)

    def to_json(self) -> str:
        """Return deterministic JSON with sorted keys."""
        return json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=True)

    @classmethod
    def from_json(cls: Type[ModelT], text: str) -> ModelT:
        return cls.model_validate_json(text)
