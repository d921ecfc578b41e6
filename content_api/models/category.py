from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryStatus(str, Enum):
    """Lifecycle of a guide category."""
    FINISHED = "CategoryFinished"
    IN_PROGRESS = "CategoryWIP"
    TO_BE_WRITTEN = "CategoryStub"


class _ServerRecord(BaseModel):
    """
    Read-only view model built from a server response.
    Unknown fields are kept so the record dumps back to the exact body.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CategoryItem(_ServerRecord):
    pass


class CategoryInfo(_ServerRecord):
    title: str
    created: str
    group: str
    status: CategoryStatus


class CategoryFull(CategoryInfo):
    created: Optional[str] = None
    description: Dict[str, Any] = Field(default_factory=dict)
    items: List[CategoryItem] = Field(default_factory=list)
