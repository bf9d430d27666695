"""
Ordered identifier sequences.

A packed sequence is written as its u32 element count followed by the
elements back-to-back. The order defined here mirrors that encoding:
sequences compare by length first, and only equal-length sequences
compare element by element. Two peers packing canonically ordered
sequences therefore produce byte-identical output.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Iterator, Sequence, TypeVar

from pydantic import Field, field_validator
from typing_extensions import Self

from ..packer import Packer, Unpacker
from ..types.base import StrictBaseModel
from ..types.exceptions import IdDecodeError, IdsError
from .base import BaseId

T = TypeVar("T", bound=BaseId)
"""
Generic type parameter for collection elements.

Example:
    class Ids(BaseIdList[Id]):
        ELEMENT_TYPE = Id

    ids = Ids(data=[...])
    x = ids[0]  # Type checker infers `x: Id`
"""


class BaseIdList(StrictBaseModel, Generic[T]):
    """
    Immutable, ordered sequence of identifiers of one type.

    Subclasses must define:
        ELEMENT_TYPE: The identifier type of each element.
    """

    ELEMENT_TYPE: ClassVar[type[BaseId]]
    """The identifier type of elements in this sequence."""

    data: Sequence[T] = Field(default_factory=tuple)
    """
    The immutable sequence of elements.

    Accepts lists or tuples of identifiers or their text forms on input;
    stored as a tuple after validation.
    """

    @field_validator("data", mode="before")
    @classmethod
    def _validate_data(cls, v: Any) -> tuple[BaseId, ...]:
        """Validate and convert input to a typed tuple."""
        if not hasattr(cls, "ELEMENT_TYPE"):
            raise TypeError(f"{cls.__name__} must define ELEMENT_TYPE")
        if isinstance(v, (str, bytes)):
            raise ValueError(f"{cls.__name__} expects a sequence of identifiers")

        return tuple(cls._coerce_element(item) for item in v)

    @classmethod
    def _coerce_element(cls, item: Any) -> BaseId:
        if isinstance(item, cls.ELEMENT_TYPE):
            return item
        try:
            if isinstance(item, str):
                return cls.ELEMENT_TYPE.from_string(item)
            return cls.ELEMENT_TYPE(item)
        except (IdsError, TypeError) as e:
            raise ValueError(str(e)) from e

    def sorted(self) -> Self:
        """Return a new sequence with the elements in canonical (ascending) order."""
        return type(self)(data=sorted(self.data))

    def encode_bytes(self) -> bytes:
        """Pack as a u32 element count followed by each element's raw bytes."""
        packer = Packer()
        packer.pack_u32(len(self.data))
        for element in self.data:
            packer.pack_bytes(bytes(element))
        return packer.take_bytes()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse the packed form produced by `encode_bytes`.

        Raises:
            PackerError: If the input ends before all elements are read.
            IdDecodeError: If bytes remain after the last element.
        """
        unpacker = Unpacker(data)
        count = unpacker.unpack_u32()
        elements = [
            cls.ELEMENT_TYPE(unpacker.unpack_bytes(cls.ELEMENT_TYPE.LENGTH)) for _ in range(count)
        ]
        if unpacker.remaining:
            raise IdDecodeError(cls.__name__, f"{unpacker.remaining} trailing bytes")
        return cls(data=elements)

    def _compare(self, other: BaseIdList[Any]) -> int:
        """Length first, then element by element; -1, 0 or 1."""
        if len(self.data) != len(other.data):
            return -1 if len(self.data) < len(other.data) else 1
        for a, b in zip(self.data, other.data, strict=True):
            if a != b:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._compare(other) == 0  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._compare(other) >= 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.data)))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    def __repr__(self) -> str:
        """String representation showing the class name and elements."""
        return f"{self.__class__.__name__}(data={list(self.data)!r})"
