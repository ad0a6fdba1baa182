import string

# Each rule is a tuple: (predicate returning True on error, error_message).
# A marker must survive tokenization as a single unquoted token.
_AFFIX_VALIDATION_RULES = [
    (lambda p: any(c.isspace() for c in p), "cannot contain whitespace"),
    (lambda p: '"' in p, "cannot contain double quotes"),
    (
        lambda p: not all(c in string.printable for c in p),
        "must contain only printable characters",
    ),
]


def validate_affix(affix: str, kind: str = "prefix") -> str | None:
    """Return error message if a marker prefix/suffix is invalid, otherwise None.

    Empty affixes are allowed.
    """
    if not isinstance(affix, str):
        return f"{kind} must be a string"

    for check, message in _AFFIX_VALIDATION_RULES:
        if affix and check(affix):  # type: ignore[no-untyped-call]
            return f"{kind} {message}"

    return None


def validate_parameter_name(name: str) -> str | None:
    """Return error message if a parameter name is invalid, otherwise None."""
    if not isinstance(name, str) or not name:
        return "parameter name must be a non-empty string"

    return validate_affix(name, kind="parameter name")
