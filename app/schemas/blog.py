import math
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
)


class ContentUnit(BaseModel):
    """A parsed markdown file: front matter plus body. Has no identity of its own."""

    metadata: Dict[Any, Any] = Field(default_factory=dict)
    content: str = ""


class Post(BaseModel):
    # unknown front-matter keys are passed through verbatim
    model_config = ConfigDict(extra="allow")

    slug: str = Field(min_length=1)
    indexVal: Union[StrictInt, StrictFloat]
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    author: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("indexVal")
    @classmethod
    def _finite_index(cls, value):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("indexVal must be a finite number")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_str(cls, value):
        # YAML front matter yields date/datetime objects for unquoted dates
        if hasattr(value, "isoformat"):
            return value.isoformat()
        return value

    @field_validator("title", "description", "author", mode="before")
    @classmethod
    def _scalar_to_str(cls, value):
        # e.g. `title: 1984` parses as an int
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, set):
            value = sorted(value, key=str)
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return [str(value)]

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)
