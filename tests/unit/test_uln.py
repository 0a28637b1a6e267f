"""Tests for the ULN value object."""

from __future__ import annotations

import copy
import pickle

import pytest
from pydantic import BaseModel, ValidationError

from uln import ULN, InvalidValueError, NullInputError


class LearnerRecord(BaseModel):
    uln: ULN
    name: str = ""


def test_from_string():
    uln = ULN.from_string("0000000042")
    assert isinstance(uln, ULN)
    assert uln.value == "0000000042"


def test_from_string_none_raises_null_input():
    with pytest.raises(NullInputError):
        ULN.from_string(None)


@pytest.mark.parametrize("value", [str(d) * 10 for d in range(10)])
def test_from_string_invalid_value(value):
    with pytest.raises(InvalidValueError):
        ULN.from_string(value)


def test_from_string_bad_format_raises_invalid_value():
    with pytest.raises(InvalidValueError):
        ULN.from_string("42")


def test_direct_construction_is_rejected():
    with pytest.raises(TypeError, match="from_string"):
        ULN("0000000042")
    with pytest.raises(TypeError):
        ULN("0000000000", _token=object())


def test_immutable():
    uln = ULN.from_string("0000000042")
    with pytest.raises(AttributeError):
        uln._value = "0000000000"
    with pytest.raises(AttributeError):
        uln.value = "0000000000"
    with pytest.raises(AttributeError):
        del uln._value
    assert uln.value == "0000000042"


def test_equals_same_object():
    uln = ULN.from_string("0000000042")
    assert uln == uln


def test_equals_equal_value():
    assert ULN.from_string("0000000042") == ULN.from_string("0000000042")


def test_not_equal_to_other_value():
    assert ULN.from_string("0000000042") != ULN.from_string("0000000050")


def test_not_equal_to_none_or_string():
    uln = ULN.from_string("0000000042")
    assert uln != None  # noqa: E711
    assert uln != "0000000042"


def test_hash_consistent_with_equality():
    uln1 = ULN.from_string("0000000042")
    uln2 = ULN.from_string("0000000042")
    assert hash(uln1) == hash(uln2)
    assert len({uln1, uln2}) == 1


def test_str_and_repr():
    uln = ULN.from_string("0000000042")
    assert str(uln) == "ULN(0000000042)"
    assert repr(uln) == "ULN(0000000042)"


def test_compare_to():
    uln = ULN.from_string("0000000042")
    assert uln.compare_to(ULN.from_string("0000000050")) == -1
    assert uln.compare_to(ULN.from_string("0000000042")) == 0
    assert uln.compare_to(ULN.from_string("0000000034")) == 1


def test_compare_to_none_raises_null_input():
    with pytest.raises(NullInputError):
        ULN.from_string("0000000042").compare_to(None)


def test_rich_comparisons():
    low = ULN.from_string("0000000034")
    mid = ULN.from_string("0000000042")
    high = ULN.from_string("0000000050")
    assert low < mid < high
    assert high > mid > low
    assert mid <= ULN.from_string("0000000042")
    assert mid >= ULN.from_string("0000000042")
    assert sorted([high, low, mid]) == [low, mid, high]


def test_ordering_against_string_raises_type_error():
    with pytest.raises(TypeError):
        ULN.from_string("0000000042") < "0000000050"  # noqa: B015


def test_bytes_round_trip():
    uln = ULN.from_string("0000000042")
    data = uln.to_bytes()
    assert data == b"0000000042"
    assert ULN.from_bytes(data) == uln


def test_from_bytes_revalidates():
    with pytest.raises(InvalidValueError):
        ULN.from_bytes(b"0000000041")
    with pytest.raises(InvalidValueError):
        ULN.from_bytes(b"\xff\xfe00000042")
    with pytest.raises(NullInputError):
        ULN.from_bytes(None)


def test_pickle_round_trip():
    uln = ULN.from_string("0000000042")
    restored = pickle.loads(pickle.dumps(uln))
    assert restored == uln
    assert isinstance(restored, ULN)


def test_copy_returns_same_instance():
    uln = ULN.from_string("0000000042")
    assert copy.copy(uln) is uln
    assert copy.deepcopy(uln) is uln


def test_pydantic_field_from_string():
    record = LearnerRecord(uln="0000000042")
    assert record.uln == ULN.from_string("0000000042")


def test_pydantic_field_accepts_uln_instance():
    uln = ULN.from_string("0000000042")
    assert LearnerRecord(uln=uln).uln is uln


def test_pydantic_json_round_trip():
    record = LearnerRecord(uln="0000000042", name="Ada")
    payload = record.model_dump_json()
    assert payload == '{"uln":"0000000042","name":"Ada"}'
    assert LearnerRecord.model_validate_json(payload) == record


def test_pydantic_dump_python_mode_json():
    record = LearnerRecord(uln="0000000042")
    assert record.model_dump(mode="json") == {"uln": "0000000042", "name": ""}


@pytest.mark.parametrize("value", ["0000000041", "1111111111", "42", None, 42])
def test_pydantic_field_rejects_invalid(value):
    with pytest.raises(ValidationError):
        LearnerRecord(uln=value)


@pytest.mark.parametrize("data", ["0000000042", 10, [48] * 10])
def test_from_bytes_rejects_non_bytes(data):
    with pytest.raises(InvalidValueError) as exc_info:
        ULN.from_bytes(data)
    assert exc_info.value.value == data


def test_from_bytes_accepts_bytearray_and_memoryview():
    uln = ULN.from_string("0000000042")
    assert ULN.from_bytes(bytearray(b"0000000042")) == uln
    assert ULN.from_bytes(memoryview(b"0000000042")) == uln
