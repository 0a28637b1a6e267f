"""ULN value object: a validated, immutable 10-digit Unique Learner Number.

See https://www.gov.uk/education/learning-records-service-lrs
"""

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from uln.core.exceptions import InvalidValueError, NullInputError
from uln.core.types import ULNString
from uln.validator.uln_validator import require_valid_uln

_CONSTRUCTION_TOKEN = object()


class ULN:
    """A Unique Learner Number that has passed format and checksum validation.

    Instances are only created through ``ULN.from_string`` (or ``from_bytes``),
    so an invalid ULN object cannot exist.
    """

    __slots__ = ("_value",)

    _value: ULNString

    @classmethod
    def from_string(cls, value: ULNString) -> ULN:
        """Create a ULN from its 10-digit string form.

        Raises:
            NullInputError: if *value* is None.
            InvalidValueError: if *value* is not a valid ULN.
        """
        return cls(require_valid_uln(value), _token=_CONSTRUCTION_TOKEN)

    @classmethod
    def from_bytes(cls, data: bytes) -> ULN:
        """Create a ULN from the output of ``to_bytes``."""
        if data is None:
            raise NullInputError("ULN bytes cannot be None")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidValueError(data)
        return cls.from_string(bytes(data).decode("ascii", errors="replace"))

    def __init__(self, value: ULNString, *, _token: object = None) -> None:
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("ULN objects must be created with ULN.from_string()")
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> ULNString:
        """The 10-digit string."""
        return self._value

    def to_bytes(self) -> bytes:
        return self._value.encode("ascii")

    def compare_to(self, other: ULN) -> int:
        """Return -1, 0 or 1 as this ULN sorts before, equal to or after *other*."""
        if other is None:
            raise NullInputError("ULN object cannot be None")
        if not isinstance(other, ULN):
            raise TypeError(f"Cannot compare ULN with {type(other).__name__}")
        return (self._value > other._value) - (self._value < other._value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ULN):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ULN):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ULN):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ULN):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ULN):
            return NotImplemented
        return self._value >= other._value

    def __str__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    __repr__ = __str__

    # Unpickling goes back through from_string, so it re-validates.
    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).from_string, (self._value,))

    def __copy__(self) -> ULN:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> ULN:
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Accept a ULN or its string form; serialize to the plain string."""
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.from_string),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda uln: uln.value
            ),
        )
