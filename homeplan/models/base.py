"""Shared base model for HomePlan value objects."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PlanModel(BaseModel):
    """Immutable model with camelCase wire names.

    Attributes are snake_case in Python; serialisation uses camelCase
    aliases. Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict format for JSON transport or storage."""
        return self.model_dump(by_alias=True, mode="json")
