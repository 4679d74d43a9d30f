"""Error taxonomy for protocol decoding.

Every decode entry point raises one of these and nothing else:

ReadError:   the input could not be read or ended before the JSON value was complete.
JsonError:   the input is not syntactically valid JSON.
InvalidData: valid JSON that does not match the record's shape.
"""


class ParseError(Exception):
    """Base class for all decode failures."""

    code = "parse_error"

    def __init__(self, message: str) -> None:
        """Initialize with a human-readable message.

        Args:
            message: Human-readable error description.

        """
        super().__init__(message)
        self.message = message


class ReadError(ParseError):
    """The input stream could not be read, was not UTF-8, or ended unexpectedly."""

    code = "read_error"


class JsonError(ParseError):
    """The input is not syntactically valid JSON."""

    code = "json_error"


class InvalidData(ParseError, ValueError):
    """Syntactically valid JSON that violates a record's shape.

    Also a ValueError so field decoders can run inside pydantic validation.
    """

    code = "invalid_data"
