from __future__ import annotations

import dataclasses

import pytest
from execctl.core.errors import InvalidResultError
from execctl.validation import ScriptValidationResult, ShellcheckExit
from hypothesis import given
from hypothesis import strategies as st


def test_from_string_mapping() -> None:
    result = ScriptValidationResult.from_mapping({"isValid": "false", "exitValue": "1", "out": "SC2086", "err": ""})
    assert not result.valid
    assert result.exit_code == 1
    assert result.validation_output == "SC2086"
    assert result.error_output == ""
    assert result.exit_reason is ShellcheckExit.ISSUES_FOUND


def test_missing_output_keys_default_to_empty() -> None:
    result = ScriptValidationResult.from_mapping({"isValid": True, "exitValue": 0})
    assert result.valid
    assert result.validation_output == ""
    assert result.error_output == ""


@pytest.mark.parametrize(
    ("mapping", "message"),
    [
        (None, "cannot be None"),
        ({"exitValue": "0"}, "'isValid'"),
        ({"isValid": "true"}, "'exitValue'"),
        ({"isValid": "true", "exitValue": "zero"}, "Invalid exit value"),
        ({"isValid": "true", "exitValue": "1.5"}, "Invalid exit value"),
        ({"isValid": "true", "exitValue": "1_000"}, "Invalid exit value"),
        ({"isValid": "true", "exitValue": "\u0663"}, "Invalid exit value"),
        ({"isValid": "true", "exitValue": True}, "Invalid exit value"),
        ({"isValid": "maybe", "exitValue": "0"}, "Invalid isValid"),
    ],
)
def test_malformed_mappings_fail_construction(mapping: dict[str, object] | None, message: str) -> None:
    with pytest.raises(InvalidResultError, match=message):
        ScriptValidationResult.from_mapping(mapping)


def test_exit_reason_outside_convention() -> None:
    assert ScriptValidationResult(valid=False, exit_code=126).exit_reason is None
    assert ScriptValidationResult(valid=False, exit_code=2).exit_reason is ShellcheckExit.FILE_ACCESS


def test_result_is_immutable() -> None:
    result = ScriptValidationResult(valid=True, exit_code=0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.valid = False  # type: ignore[misc]


def test_str_omits_empty_outputs() -> None:
    assert str(ScriptValidationResult(valid=True, exit_code=0)) == "ScriptValidationResult{valid=true, exitCode=0}"
    text = str(ScriptValidationResult(valid=False, exit_code=2, validation_output="", error_output="no such file"))
    assert text == "ScriptValidationResult{valid=false, exitCode=2, errorOutput='no such file'}"


@given(
    valid=st.booleans(),
    exit_code=st.integers(min_value=0, max_value=255),
    out=st.text(),
    err=st.text(),
)
def test_well_formed_mapping_round_trips(valid: bool, exit_code: int, out: str, err: str) -> None:
    mapping = {"isValid": valid, "exitValue": exit_code, "out": out, "err": err}
    assert ScriptValidationResult.from_mapping(mapping).to_mapping() == mapping


@pytest.mark.parametrize(("raw", "expected"), [("0", 0), (" 4 ", 4), ("+2", 2), ("-1", -1), (7, 7)])
def test_integer_exit_values_parse(raw: object, expected: int) -> None:
    assert ScriptValidationResult.from_mapping({"isValid": "false", "exitValue": raw}).exit_code == expected
