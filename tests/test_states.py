import pytest

from ventshutter.states import ErrorFlag, ShutterState, error_matches


def test_state_values():
    assert [s.value for s in ShutterState] == [0, 1, 2, 3]
    assert ShutterState(2) is ShutterState.CLOSING


@pytest.mark.parametrize(
    "value, flag",
    [
        (0, ErrorFlag.NONE),
        (2, ErrorFlag.TIMEOUT_CLOSING),
        (4, ErrorFlag.TIMEOUT_OPENING),
        (8, ErrorFlag.LOST_CLOSED_SENSOR),
        (16, ErrorFlag.LOST_OPEN_SENSOR),
        (32, ErrorFlag.BOTH_SENSORS_CONFIRMED),
    ],
)
def test_error_flag_values(value, flag):
    assert ErrorFlag(value) is flag


def test_flags_combine_as_bits():
    combined = ErrorFlag.TIMEOUT_OPENING | ErrorFlag.BOTH_SENSORS_CONFIRMED
    assert ErrorFlag(36) == combined
    assert ErrorFlag.TIMEOUT_OPENING in combined
    assert ErrorFlag.TIMEOUT_CLOSING not in combined
    assert not error_matches(combined, ErrorFlag.TIMEOUT_OPENING)


def test_exact_flag_matches():
    assert error_matches(ErrorFlag.TIMEOUT_OPENING, ErrorFlag.TIMEOUT_OPENING)


def test_empty_register_matches_any_flag():
    for flag in ErrorFlag:
        assert error_matches(ErrorFlag.NONE, flag)


def test_other_flag_does_not_match():
    assert not error_matches(ErrorFlag.TIMEOUT_CLOSING, ErrorFlag.TIMEOUT_OPENING)


@pytest.mark.parametrize(
    "extra", [ErrorFlag.BOTH_SENSORS_CONFIRMED, ErrorFlag.TIMEOUT_CLOSING]
)
def test_extra_bits_prevent_match(extra):
    errors = ErrorFlag.TIMEOUT_OPENING | extra
    assert not error_matches(errors, ErrorFlag.TIMEOUT_OPENING)