"""Helpers turning loose key/value input into request arguments."""

from collections.abc import Mapping

from src.core.errors import InvalidRequestConfigError

__all__ = ["pair_arguments", "validate_arguments"]


def pair_arguments(*items: object) -> dict[str, str]:
    """Build an argument map from alternating keys and values.

    Values are converted with str(); pairs whose value is None are skipped.
    A key seen twice keeps its last value.

    Example:
        pair_arguments("user", "alice", "limit", 25)
        -> {"user": "alice", "limit": "25"}

    Raises:
        InvalidRequestConfigError: On an odd number of items or a non-string key.
    """
    if len(items) % 2 != 0:
        raise InvalidRequestConfigError(
            f"Arguments must come in key/value pairs (got {len(items)} items)"
        )

    arguments: dict[str, str] = {}
    for index in range(0, len(items), 2):
        key, value = items[index], items[index + 1]
        if not isinstance(key, str):
            raise InvalidRequestConfigError(
                f"Argument key at position {index} must be a string, got {type(key).__name__}"
            )
        if value is None:
            continue
        arguments[key] = str(value)
    return arguments


def validate_arguments(arguments: Mapping[str, str]) -> dict[str, str]:
    """Return a private copy of an argument map after checking its types.

    Raises:
        InvalidRequestConfigError: If the input is not a mapping of str to str.
    """
    if not isinstance(arguments, Mapping):
        raise InvalidRequestConfigError(
            f"Arguments must be a mapping, got {type(arguments).__name__}"
        )
    for key, value in arguments.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidRequestConfigError(
                f"Arguments must map strings to strings (offending entry: {key!r}={value!r})"
            )
    return dict(arguments)
