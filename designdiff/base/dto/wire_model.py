"""Base class for every canonical result DTO.

Fields are declared in snake_case and serialized with camelCase aliases;
either spelling is accepted on input and unknown keys are preserved so a
well-formed model reply survives validation unchanged.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase JSON-ready mapping, dropping unset optionals."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


__all__ = ["WireModel"]
