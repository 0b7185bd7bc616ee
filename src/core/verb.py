"""HTTP verbs understood by the request core."""

from enum import Enum

from src.core.errors import InvalidRequestConfigError

__all__ = ["HttpVerb"]


class HttpVerb(str, Enum):
    """HTTP method of a request.

    GET and DELETE pass their arguments in the query string and carry no
    body; every other verb sends arguments as a form or a JSON body.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @property
    def carries_body(self) -> bool:
        return self not in (HttpVerb.GET, HttpVerb.DELETE)

    @property
    def is_idempotent(self) -> bool:
        """True if sending the request twice has the same effect as once."""
        return self in (HttpVerb.GET, HttpVerb.PUT, HttpVerb.DELETE)

    @classmethod
    def parse(cls, value: "HttpVerb | str") -> "HttpVerb":
        """Coerce a verb name (any case) into an HttpVerb.

        Raises:
            InvalidRequestConfigError: If the verb is not supported.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as e:
            raise InvalidRequestConfigError(f"Unsupported HTTP verb: {value!r}") from e

    def __str__(self) -> str:
        return self.value
