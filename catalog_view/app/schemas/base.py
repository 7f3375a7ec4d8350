"""
Base model for upstream payloads.

Upstream records may carry ``null`` where a value is expected; such
fields take their declared default, the same as a missing field.
"""

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator


class UpstreamModel(BaseModel):
    model_config = {
        "populate_by_name": True,
    }

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value
