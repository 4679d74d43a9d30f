"""JSON loading and the shared base model for protocol records.

The transport hands the codec one isolated JSON message at a time. Loading turns it into a
JSON value and classifies syntax and read failures; WireRecord validates the value into an
immutable record and serializes records back into compact canonical JSON.
"""

import json
import logging
from typing import IO, Annotated, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from i3bar_protocol.errors import InvalidData, JsonError, ReadError

logger = logging.getLogger(__name__)

U8_MAX = 255
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1

U8 = Annotated[int, Field(ge=0, le=U8_MAX)]
I32 = Annotated[int, Field(ge=I32_MIN, le=I32_MAX)]
U32 = Annotated[int, Field(ge=0, le=U32_MAX)]


def json_kind(value: object) -> str:
    """Name the JSON kind of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise InvalidData(f"duplicate field '{key}'")
        obj[key] = value
    return obj


def _reject_constant(name: str) -> float:
    # json accepts NaN and Infinity, which are not JSON
    raise JsonError(f"invalid number literal '{name}'")


def loads(data: str | bytes | bytearray) -> object:
    """Parse one JSON message into a JSON value.

    Raises:
        ReadError: Bytes are not UTF-8, or the input ends before the value is complete.
        JsonError: Input is not syntactically valid JSON.
        InvalidData: An object repeats a key.

    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReadError(f"input is not valid UTF-8: {e}") from None
    else:
        text = data

    try:
        return json.loads(text, object_pairs_hook=_reject_duplicate_keys, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        if e.pos >= len(text) or e.msg.startswith("Unterminated string"):
            raise ReadError(f"EOF while parsing: {e}") from None
        raise JsonError(str(e)) from None


def read(stream: IO[str] | IO[bytes]) -> object:
    """Read one JSON message from a stream and parse it.

    Raises:
        ReadError: The stream could not be read, or see loads().
        JsonError: See loads().
        InvalidData: See loads().

    """
    try:
        data = stream.read()
    except OSError as e:
        raise ReadError(f"could not read input: {e}") from e
    return loads(data)


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line naming every offending field."""
    parts = []
    for item in error.errors(include_url=False):
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return f"invalid {error.title}: " + "; ".join(parts)


class WireRecord(BaseModel):
    """Base for immutable protocol records.

    Validation is strict: JSON strings are never coerced into numbers or booleans, and a
    JSON integer is never accepted where a boolean is expected.
    """

    model_config = ConfigDict(frozen=True, strict=True, validate_by_name=True, validate_by_alias=True)

    # Written instead of the real encoding if serialization ever fails
    FALLBACK_JSON: ClassVar[str] = "{}"

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> Self:
        """Decode a record from JSON text or UTF-8 bytes.

        Raises:
            ReadError: Input could not be read or ended early.
            JsonError: Input is not valid JSON.
            InvalidData: Input does not match the record's shape.

        """
        return cls._decode(loads(data))

    @classmethod
    def from_value(cls, value: object) -> Self:
        """Decode a record from an already-parsed JSON value.

        Raises:
            InvalidData: Value does not match the record's shape.

        """
        return cls._decode(value)

    @classmethod
    def read(cls, stream: IO[str] | IO[bytes]) -> Self:
        """Decode a record from a readable stream holding one JSON message.

        Raises:
            ReadError: Stream could not be read or ended early.
            JsonError: Input is not valid JSON.
            InvalidData: Input does not match the record's shape.

        """
        return cls._decode(read(stream))

    @classmethod
    def _decode(cls, value: object, context: dict[str, Any] | None = None) -> Self:
        try:
            # Wire input is matched by wire key only; field names are for programmatic construction
            return cls.model_validate(value, context=context, by_alias=True, by_name=False)
        except ValidationError as e:
            err = InvalidData(describe_validation_error(e))
            logger.debug("Rejected %s: %s", cls.__name__, err.message)
            raise err from None

    def to_value(self) -> dict[str, Any]:
        """Encode into a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Encode into compact JSON text. Never raises."""
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError:
            logger.exception("Failed to serialize %s, writing fallback", type(self).__name__)
            return self.FALLBACK_JSON

    def __str__(self) -> str:
        """Compact JSON, as written to the wire."""
        return self.to_json()
