"""
Base models for documents that carry identifiers.

Identifier-bearing JSON exchanged with Avalanche tooling uses camelCase
keys (`nodeId`, `rewardOwner`, `subnetId`), while Python code uses
snake_case attributes. `IdsModel` maps between the two; documents accept
either spelling on input and emit camelCase with `by_alias=True`.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class IdsModel(BaseModel):
    """Model whose JSON keys are the camelCase form of its field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:
        """
        Return a copy with `kwargs` applied, re-running validation.

        Unlike `model_copy(update=...)`, identifier fields given as text are
        parsed and checked here.
        """
        return self.__class__(**(self.model_dump(exclude_unset=True) | kwargs))


class StrictBaseModel(IdsModel):
    """
    Immutable document model.

    Unknown keys are rejected, values are never coerced across types (a
    `ShortId` is not accepted for a `NodeId` field) and instances are
    frozen, so documents holding identifiers are hashable.
    """

    model_config = IdsModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
