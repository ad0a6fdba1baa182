import pytest
from claparse.marker_affix import validate_affix, validate_parameter_name


@pytest.mark.parametrize("affix", ["", "-", "--", "/", "=", ":"])
def test_valid_affixes(affix):
    assert validate_affix(affix) is None


@pytest.mark.parametrize(
    "affix, message",
    [
        ("- ", "prefix cannot contain whitespace"),
        ('"', "prefix cannot contain double quotes"),
        ("é", "prefix must contain only printable characters"),
        (None, "prefix must be a string"),
    ],
)
def test_invalid_affixes(affix, message):
    assert validate_affix(affix) == message


def test_affix_kind_in_message():
    assert validate_affix("a b", kind="suffix") == "suffix cannot contain whitespace"


@pytest.mark.parametrize("name", ["help", "h", "?", "dry-run"])
def test_valid_parameter_names(name):
    assert validate_parameter_name(name) is None


@pytest.mark.parametrize("name", ["", None, "two words"])
def test_invalid_parameter_names(name):
    assert validate_parameter_name(name) is not None
