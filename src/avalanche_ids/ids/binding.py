"""
Binding identifiers inside structured documents.

Inside a pydantic model every identifier type binds through its canonical
text form (see `BaseId.__get_pydantic_core_schema__`), so the two binding
modes are plain field declarations::

    class Validator(StrictBaseModel):
        node_id: NodeId                   # required: missing/unparsable fails
        reward_owner: ShortId | None = None   # optional: absent means None

The helpers below give the same two modes for values taken out of
untyped documents (decoded JSON, YAML, config dicts).
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from ..types.exceptions import IdDecodeError, SchemaBindingError
from .base import BaseId

IdT = TypeVar("IdT", bound=BaseId)
ModelT = TypeVar("ModelT", bound=BaseModel)


def deserialize_id(id_type: type[IdT], value: str | None) -> IdT | None:
    """
    Bind an optional identifier.

    Returns:
        `None` when `value` is `None`, otherwise the parsed identifier.

    Raises:
        IdDecodeError: If `value` is present but not a valid text form.
    """
    if value is None:
        return None
    return id_type.from_string(value)


def must_deserialize_id(
    id_type: type[IdT],
    value: str | None,
    *,
    field_name: str | None = None,
) -> IdT:
    """
    Bind a required identifier.

    Raises:
        SchemaBindingError: If `value` is absent or not a valid text form.
    """
    try:
        parsed = deserialize_id(id_type, value)
    except IdDecodeError as e:
        raise SchemaBindingError(id_type.__name__, e.detail, field_name=field_name) from e

    if parsed is None:
        raise SchemaBindingError(
            id_type.__name__,
            f"empty {id_type.__name__} from deserialization",
            field_name=field_name,
        )
    return parsed


def load_document(model: type[ModelT], payload: str | bytes | Mapping[str, Any]) -> ModelT:
    """
    Validate a whole document, reporting binding failures as `SchemaBindingError`.

    Args:
        model: The pydantic model describing the document.
        payload: JSON text, or an already-decoded mapping.

    Raises:
        SchemaBindingError: If any field (e.g. a required identifier) is missing
            or invalid. The pydantic `ValidationError` is chained as the cause.
    """
    try:
        if isinstance(payload, (str, bytes)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"]) or None
        raise SchemaBindingError(model.__name__, first["msg"], field_name=field_name) from e
