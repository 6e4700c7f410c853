"""Token stream serialization — JSON round-trip for validated tokens.

Lets a token stream cross a process boundary to a renderer written
elsewhere, or be cached and inspected.

All output is deterministic (sorted keys).

Example:
    from delimark import process
    from delimark.serialization import to_json, from_json

    tokens = process("_hello_\\n")
    restored = from_json(to_json(tokens))
    assert tokens == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from delimark.errors import SerializationError
from delimark.tokens import TOKEN_CLASSES, Token

# Registry of token type names to classes for deserialization
_TOKEN_TYPES: dict[str, type[Token]] = {cls.__name__: cls for cls in TOKEN_CLASSES.values()}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    return {
        "_type": type(token).__name__,
        "value": token.value,
        "lineno": token.lineno,
        "col": token.col,
        "offset": token.offset,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict().

    Raises:
        SerializationError: If the type is unknown or "value" is missing.
    """
    type_name = data.get("_type")
    cls = _TOKEN_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise SerializationError(f"Unknown token type: {type_name!r}")
    value = data.get("value")
    if not isinstance(value, str):
        raise SerializationError(f"Token {type_name} has no string value")
    return cls(
        value,
        lineno=data.get("lineno", 0),
        col=data.get("col", 0),
        offset=data.get("offset", 0),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array."""
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array produced by to_json().

    Raises:
        SerializationError: If the payload is not a list of token dicts.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid token JSON: {e}") from e
    if not isinstance(data, list):
        raise SerializationError("Token JSON must be an array")
    tokens = []
    for item in data:
        if not isinstance(item, dict):
            raise SerializationError(f"Token entry must be an object, got {type(item).__name__}")
        tokens.append(from_dict(item))
    return tokens


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
