import pytest

from duty_attendance.common.validators import require_int
from duty_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize("value, expected", [(7, 7), ("12", 12), (" 3 ", 3)])
def test_require_int_accepts_ints_and_digit_strings(value, expected):
    assert require_int(value, "id") == expected


@pytest.mark.parametrize("value", ["abc", "", None, True, 1.5, "1.5", [1]])
def test_require_int_rejects_other_values(value):
    with pytest.raises(ValidationError, match="id must be an integer"):
        require_int(value, "id")
