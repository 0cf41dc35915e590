import pytest
from pydantic import TypeAdapter, ValidationError

from btxrpc.core.types import DescRange, DescTimestamp, Scanning

desc_range = TypeAdapter(DescRange)
desc_timestamp = TypeAdapter(DescTimestamp)
scanning = TypeAdapter(Scanning)


@pytest.mark.parametrize("value, expected", [(5, 5), (0, 0), ([0, 10], [0, 10]), ((3, 3), [3, 3])])
def test_range_accepts(value, expected):
    assert desc_range.validate_python(value) == expected


@pytest.mark.parametrize("value", [[10, 0], -1, "5", [1], [1, 2, 3], [-1, 5], [0, "10"], True, 1.5, None])
def test_range_rejects(value):
    with pytest.raises(ValidationError) as exc_info:
        desc_range.validate_python(value)

    (error,) = exc_info.value.errors()
    assert error["type"] == "desc_range"
    assert error["msg"].startswith("must be a non-negative integer or array [begin, end], got: ")


@pytest.mark.parametrize("value", [0, 1_700_000_000, "now"])
def test_timestamp_accepts(value):
    assert desc_timestamp.validate_python(value) == value


@pytest.mark.parametrize("value", ["later", -1, "NOW", "0", False, 1.0])
def test_timestamp_rejects(value):
    with pytest.raises(ValidationError, match='must be a non-negative integer or "now"'):
        desc_timestamp.validate_python(value)


def test_scanning():
    assert scanning.validate_python(False) is False
    assert scanning.validate_python({"duration": 10, "progress": 0.5}) == {"duration": 10, "progress": 0.5}

    for value in (True, {"duration": 10}, "yes", 0):
        with pytest.raises(ValidationError, match="must be a map with scanning details or false"):
            scanning.validate_python(value)
