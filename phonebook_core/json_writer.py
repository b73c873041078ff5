# phonebook_core/json_writer.py
"""
Small JSON writer for phonebook exports.

The layout is fixed (two-space object indent, four-space keys, list items
on their own lines) so files written by older versions diff cleanly.
Strings are written raw unless escaping is turned on.
"""

from typing import Dict, Iterable, List, Optional, Union
import json

from phonebook_core import config

JsonValue = Union[str, List[str]]


class JsonDocument:
    """Ordered record of string / list-of-string values."""

    def __init__(self):
        self._fields: Dict[str, JsonValue] = {}

    def add(self, key: str, value: JsonValue) -> "JsonDocument":
        if not isinstance(value, (str, list)):
            raise TypeError(f"unsupported JSON value for {key!r}: {type(value).__name__}")
        self._fields[key] = value
        return self

    def items(self):
        return self._fields.items()


class JsonWriter:
    def __init__(self, escape: Optional[bool] = None):
        self.escape = config.PHONEBOOK_JSON_ESCAPE if escape is None else bool(escape)

    def _string(self, value: str) -> str:
        if self.escape:
            return json.dumps(value, ensure_ascii=False)
        return f'"{value}"'

    def _entry(self, key: str, value: JsonValue) -> str:
        if isinstance(value, str):
            return f"{self._string(key)}: {self._string(value)}"
        if not value:
            return f"{self._string(key)}: []"
        items = ",\n  ".join("    " + self._string(v) for v in value)
        return f"{self._string(key)}: [\n  {items}\n    ]"

    def render_document(self, doc: JsonDocument) -> str:
        body = ",\n    ".join(self._entry(k, v) for k, v in doc.items())
        return "\n  {\n    " + body + "\n  }\n"

    def render_array(self, docs: Iterable[JsonDocument]) -> str:
        return "[" + ", ".join(self.render_document(d) for d in docs) + "]"
