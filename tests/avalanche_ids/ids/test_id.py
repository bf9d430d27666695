"""Tests for the 32-byte Id."""

from __future__ import annotations

import hashlib
import pickle
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from avalanche_ids.formatting import Base58
from avalanche_ids.ids import EMPTY_ID, Id
from avalanche_ids.types import ChecksumMismatchError, IdConstructionError, IdDecodeError
from tests.avalanche_ids.helpers import ID_VECTOR_BYTES, ID_VECTOR_TEXT, ZERO_ID_TEXT


class TestConstruction:
    """Tests for building ids from raw bytes."""

    def test_is_bytes_of_nominal_length(self) -> None:
        v = Id(ID_VECTOR_BYTES)
        assert isinstance(v, bytes)
        assert len(v) == Id.LENGTH == 32
        assert v.to_bytes() == ID_VECTOR_BYTES

    def test_short_input_is_right_padded(self) -> None:
        assert Id(b"\x01\x02").to_bytes() == b"\x01\x02" + bytes(30)

    def test_lengths_of_inputs_do_not_matter(self) -> None:
        assert Id(b"\x01\x00\x00\x00") == Id(b"\x01\x00\x00\x00\x00")

    @pytest.mark.parametrize(
        "value",
        [b"\x01\x02", bytearray(b"\x01\x02"), [1, 2], "0102", "0x0102", memoryview(b"\x01\x02")],
    )
    def test_coercion(self, value: object) -> None:
        assert Id(value) == Id.from_bytes(b"\x01\x02")

    def test_too_long_input_raises(self) -> None:
        with pytest.raises(IdConstructionError) as exc_info:
            Id(bytes(33))
        assert exc_info.value.type_name == "Id"
        assert exc_info.value.expected == 32
        assert exc_info.value.actual == 33

    def test_unsupported_input_type(self) -> None:
        with pytest.raises(TypeError):
            Id(42)

    @given(st.binary(max_size=32))
    def test_padding_property(self, data: bytes) -> None:
        assert Id.from_bytes(data) == Id.from_bytes(data + bytes(32 - len(data)))


class TestEmpty:
    """Tests for the all-zero sentinel."""

    def test_empty_is_all_zero(self) -> None:
        assert Id.empty().to_bytes() == bytes(32)
        assert Id.empty().is_empty()
        assert Id().is_empty()

    def test_empty_is_shared(self) -> None:
        assert Id.empty() is Id.empty()
        assert EMPTY_ID is Id.empty()

    def test_non_zero_is_not_empty(self) -> None:
        assert not Id(b"\x00" * 31 + b"\x01").is_empty()


class TestText:
    """Tests for the CB58 text form."""

    def test_vector(self) -> None:
        v = Id(ID_VECTOR_BYTES)
        assert str(v) == ID_VECTOR_TEXT
        assert v.to_string() == ID_VECTOR_TEXT
        assert f"{v}" == ID_VECTOR_TEXT
        assert Id.from_string(ID_VECTOR_TEXT) == v

    def test_zero_vector(self) -> None:
        assert str(Id.empty()) == ZERO_ID_TEXT
        assert Id.from_string(ZERO_ID_TEXT) == Id.empty()

    def test_repr(self) -> None:
        assert repr(Id(ID_VECTOR_BYTES)) == f"Id('{ID_VECTOR_TEXT}')"

    def test_short_payload_is_padded(self) -> None:
        from avalanche_ids.formatting import encode_cb58_with_checksum

        assert Id.from_string(encode_cb58_with_checksum(b"\x07")) == Id(b"\x07")

    def test_long_payload_is_rejected(self) -> None:
        from avalanche_ids.formatting import encode_cb58_with_checksum

        with pytest.raises(IdDecodeError, match="expected at most 32"):
            Id.from_string(encode_cb58_with_checksum(bytes(33)))

    def test_bad_checksum(self) -> None:
        # Swapping two characters keeps the alphabet but breaks the checksum.
        tampered = ID_VECTOR_TEXT[1] + ID_VECTOR_TEXT[0] + ID_VECTOR_TEXT[2:]
        with pytest.raises(ChecksumMismatchError):
            Id.from_string(tampered)

    def test_empty_string(self) -> None:
        with pytest.raises(IdDecodeError):
            Id.from_string("")

    @pytest.mark.parametrize("value", [5, None, ID_VECTOR_TEXT.encode()])
    def test_non_text_input(self, value: object) -> None:
        with pytest.raises(IdDecodeError, match="expected text"):
            Id.from_string(value)  # type: ignore[arg-type]

    def test_max_text_length(self) -> None:
        assert Id.max_text_length() == 50
        # The largest 36-byte value needs every allowed character.
        assert len(Base58.encode(b"\xff" * 36)) == 50

    def test_overlong_text_is_rejected_before_decoding(self) -> None:
        with pytest.raises(IdDecodeError, match="longer than 50"):
            Id.from_string("1" * 51)
        with pytest.raises(IdDecodeError, match="longer than"):
            Id.from_string("z" * 100_000)

    def test_node_id_prefix_is_not_stripped(self) -> None:
        with pytest.raises(IdDecodeError):
            Id.from_string("NodeID-" + ID_VECTOR_TEXT)

    @given(st.binary(min_size=32, max_size=32))
    def test_roundtrip(self, data: bytes) -> None:
        v = Id.from_bytes(data)
        assert Id.from_string(str(v)) == v


class TestOrderingAndHashing:
    """Tests for comparison and hashing over the full buffer."""

    def test_sort_ids(self) -> None:
        ids = [Id(b"\x03"), Id(b"\x02"), Id(b"\x01")]
        assert sorted(ids) == [Id(b"\x01"), Id(b"\x02"), Id(b"\x03")]

    def test_first_byte_decides(self) -> None:
        assert Id(b"\x01\x00\x00\x00\x00") < Id(b"\x02")
        assert Id(b"\x02\x00\x00\x00\x00") > Id(b"\x01\x00\x00\x00\x00")

    def test_unsigned_comparison(self) -> None:
        assert Id(b"\x7f") < Id(b"\x80") < Id(b"\xff")

    @given(st.binary(min_size=32, max_size=32), st.binary(min_size=32, max_size=32))
    def test_order_is_total_and_lexicographic(self, a: bytes, b: bytes) -> None:
        x, y = Id(a), Id(b)
        assert [x < y, x == y, x > y].count(True) == 1
        assert (x < y) == (a < b)
        assert (x <= y) == (a <= b)
        assert (x >= y) == (a >= b)
        assert (x != y) == (a != b)

    @given(st.binary(max_size=32))
    def test_equal_values_hash_equally(self, data: bytes) -> None:
        x = Id(data)
        y = Id(data + bytes(32 - len(data)))
        assert x == y
        assert hash(x) == hash(y)

    def test_usable_as_mapping_key(self) -> None:
        index = {Id(b"\x01"): "a", Id(b"\x02"): "b"}
        assert index[Id.from_bytes(b"\x01" + bytes(31))] == "a"

    def test_not_equal_to_plain_bytes(self) -> None:
        assert Id.empty() != bytes(32)
        assert bytes(32) != Id.empty()

    def test_ordering_against_other_types_fails(self) -> None:
        with pytest.raises(TypeError):
            Id.empty() < 1  # noqa: B015

    def test_pickle_roundtrip(self) -> None:
        v = Id(ID_VECTOR_BYTES)
        restored = pickle.loads(pickle.dumps(v))
        assert type(restored) is Id
        assert restored == v


class TestPrefix:
    """Tests for tag-prefixed child id derivation."""

    def test_prefix_matches_hash_pipeline(self) -> None:
        parent = Id(ID_VECTOR_BYTES)
        expected = hashlib.sha256(struct.pack(">QQ", 1, 2) + ID_VECTOR_BYTES).digest()
        assert parent.prefix(1, 2).to_bytes() == expected

    def test_prefix_without_tags_hashes_the_id(self) -> None:
        parent = Id(ID_VECTOR_BYTES)
        assert parent.prefix().to_bytes() == hashlib.sha256(ID_VECTOR_BYTES).digest()

    def test_prefix_is_order_sensitive(self) -> None:
        parent = Id(ID_VECTOR_BYTES)
        assert parent.prefix(1, 2) != parent.prefix(2, 1)

    def test_prefix_is_deterministic(self) -> None:
        assert Id(b"\x01").prefix(7) == Id(b"\x01").prefix(7)
        assert isinstance(Id(b"\x01").prefix(7), Id)

    def test_prefix_max_tag(self) -> None:
        parent = Id.empty()
        expected = hashlib.sha256(b"\xff" * 8 + bytes(32)).digest()
        assert parent.prefix(2**64 - 1).to_bytes() == expected

    @pytest.mark.parametrize("tag", [-1, 2**64])
    def test_prefix_rejects_out_of_range_tags(self, tag: int) -> None:
        with pytest.raises(OverflowError):
            Id.empty().prefix(tag)

    @pytest.mark.parametrize("tag", [1.9, 1.0, "1"])
    def test_prefix_rejects_non_integer_tags(self, tag: object) -> None:
        with pytest.raises(TypeError):
            Id.empty().prefix(tag)  # type: ignore[arg-type]

    def test_prefix_accepts_index_types(self) -> None:
        class Tag:
            def __index__(self) -> int:
                return 3

        assert Id.empty().prefix(Tag()) == Id.empty().prefix(3)
