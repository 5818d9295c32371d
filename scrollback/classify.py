# scrollback/classify.py
"""
Classification of arbitrary logged content into a render-ready scalar.

Every input maps to exactly one ContentKind, and every kind maps to either the
value itself or one of the PLACEHOLDER_* strings. Nothing here raises.
"""

from __future__ import annotations

import dataclasses
import json
import numbers
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any, Union

from .live import NotALiveValueError, read_live

Scalar = Union[str, int, float, bool]

# ---------- Constants ----------
PLACEHOLDER_UNDEFINED = "[undefined]"
PLACEHOLDER_FUNCTION = "[function]"
PLACEHOLDER_OBJECT = "[object]"
PLACEHOLDER_UNKNOWN = "[type not found]"
PLACEHOLDER_NOT_A_SIGNAL = "[not a signal]"

_EMPTY_SERIALIZATIONS = ("{}", "[]", '""', "null")


class ContentKind(Enum):
    """Closed set of shapes log() knows how to render."""
    ABSENT = "absent"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    CALLABLE = "callable"
    STRUCTURED = "structured"
    OTHER = "other"


# ---------- Helpers ----------
def _is_structured(content: Any) -> bool:
    if isinstance(content, (bytes, bytearray, memoryview)):
        return False
    if isinstance(content, (Mapping, Set, list, tuple)):
        return True
    if dataclasses.is_dataclass(content) and not isinstance(content, type):
        return True
    return hasattr(content, "__dict__")


def _to_jsonable(obj: Any) -> Any:
    """json.dumps default hook for the structured shapes json does not know natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if isinstance(obj, Enum):
        return obj.value
    if hasattr(obj, "__dict__") and not callable(obj):
        return vars(obj)
    raise TypeError(f"{type(obj).__name__} is not serializable")


def serialize(content: Any) -> str:
    """
    Serialize a structured value to compact JSON; empty or unserializable values give [object].
    """
    try:
        text = json.dumps(content, default=_to_jsonable, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError):
        return PLACEHOLDER_OBJECT
    if text in _EMPTY_SERIALIZATIONS:
        return PLACEHOLDER_OBJECT
    return text


# ---------- Public API ----------
def classify(content: Any) -> ContentKind:
    """Return the ContentKind of content. Order matters: bool is checked before numbers."""
    if content is None:
        return ContentKind.ABSENT
    if isinstance(content, bool):
        return ContentKind.BOOLEAN
    if isinstance(content, numbers.Number) and not isinstance(content, complex):
        return ContentKind.NUMBER
    if isinstance(content, str):
        return ContentKind.STRING
    if callable(getattr(content, "read", None)) or callable(content):
        return ContentKind.CALLABLE
    if _is_structured(content):
        return ContentKind.STRUCTURED
    return ContentKind.OTHER


def coerce(content: Any) -> Scalar:
    """Map content to the scalar that a value entry stores and renders."""
    kind = classify(content)
    if kind in (ContentKind.BOOLEAN, ContentKind.NUMBER, ContentKind.STRING):
        return content
    if kind is ContentKind.ABSENT:
        return PLACEHOLDER_UNDEFINED
    if kind is ContentKind.CALLABLE:
        try:
            value = read_live(content)
        except NotALiveValueError:
            return PLACEHOLDER_FUNCTION
        if classify(value) is ContentKind.CALLABLE:
            return PLACEHOLDER_FUNCTION
        return coerce(value)
    if kind is ContentKind.STRUCTURED:
        return serialize(content)
    return PLACEHOLDER_UNKNOWN


def display_text(value: Any) -> str:
    """Text form of a stored scalar; also the key used for de-duplication."""
    return str(value)
