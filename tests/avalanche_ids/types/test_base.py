"""Tests for the document base models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from avalanche_ids.ids import NodeId, ShortId
from avalanche_ids.types import IdsModel, StrictBaseModel
from tests.avalanche_ids.helpers import NODE_ID_VECTOR_TEXT, SHORT_ID_VECTOR_BYTES


class Staker(StrictBaseModel):
    node_id: NodeId
    weight: int = 0


class Draft(IdsModel):
    node_id: NodeId | None = None


def test_camel_case_keys() -> None:
    staker = Staker.model_validate({"nodeId": NODE_ID_VECTOR_TEXT, "weight": 5})
    assert staker.model_dump(by_alias=True, mode="json") == {
        "nodeId": NODE_ID_VECTOR_TEXT,
        "weight": 5,
    }


def test_snake_case_input_is_accepted() -> None:
    assert Staker(node_id=NODE_ID_VECTOR_TEXT).node_id == NodeId(SHORT_ID_VECTOR_BYTES)


def test_strict_model_is_frozen_and_hashable() -> None:
    staker = Staker(node_id=NODE_ID_VECTOR_TEXT)
    with pytest.raises(ValidationError):
        staker.weight = 1  # type: ignore[misc]
    assert hash(staker) == hash(Staker(node_id=NODE_ID_VECTOR_TEXT))


def test_strict_model_does_not_coerce() -> None:
    with pytest.raises(ValidationError):
        Staker(node_id=NODE_ID_VECTOR_TEXT, weight="5")


def test_copy_validates_updates() -> None:
    staker = Staker(node_id=NODE_ID_VECTOR_TEXT)
    assert staker.copy(weight=7).weight == 7
    with pytest.raises(ValidationError):
        staker.copy(node_id=ShortId(SHORT_ID_VECTOR_BYTES))


def test_non_strict_model_is_mutable() -> None:
    draft = Draft()
    draft.node_id = NodeId(SHORT_ID_VECTOR_BYTES)
    assert draft.model_dump(by_alias=True, mode="json") == {"nodeId": NODE_ID_VECTOR_TEXT}
