from __future__ import annotations

import json
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from hunter_data.core.errors import ArtifactWriteError

_LUA_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_LUA_KEYWORDS = {
    "and", "break", "do", "else", "elseif", "end", "false", "for", "function",
    "goto", "if", "in", "local", "nil", "not", "or", "repeat", "return",
    "then", "true", "until", "while",
}
_LUA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


class ArtifactWriter(ABC):
    """Abstract artifact writer interface."""

    @abstractmethod
    def render(self, table: Dict[str, Any]) -> str:
        raise NotImplementedError()

    def write(self, table: Dict[str, Any], path: str | Path) -> str:
        """Render `table` and write it to `path` atomically; return the path."""
        out = Path(path)
        tmp_name = None
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=out.parent, prefix=".partial-")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(self.render(table))
            os.replace(tmp_name, out)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise ArtifactWriteError(str(out)) from exc
        return str(out)


class JsonArtifactWriter(ArtifactWriter):
    """`{"Pets": ..., "Spells": ...}` as JSON, for Python consumers."""

    def render(self, table: Dict[str, Any]) -> str:
        return json.dumps(table, indent=2, ensure_ascii=False)


def _lua_string(s: str) -> str:
    return '"' + "".join(_LUA_ESCAPES.get(ch, ch) for ch in s) + '"'


def _lua_key(key: str) -> str:
    if _LUA_IDENTIFIER.match(key) and key not in _LUA_KEYWORDS:
        return key
    return f"[{_lua_string(key)}]"


def to_lua(value: Any, indent: int = 0) -> str:
    """Render a JSON-like value as a Lua literal. `None` becomes `nil`."""
    pad = "  " * (indent + 1)
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _lua_string(value)
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [
            f"{pad}{_lua_key(str(k))} = {to_lua(v, indent + 1)}"
            for k, v in value.items()
            if v is not None
        ]
        return "{\n" + ",\n".join(items) + "\n" + "  " * indent + "}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "{}"
        return "{ " + ", ".join(to_lua(v, indent + 1) for v in value) + " }"
    raise TypeError(f"Cannot render {type(value).__name__} as Lua")


class LuaArtifactWriter(ArtifactWriter):
    """Lua source the addon loads and invokes: `getHunterDataTable()`."""

    function_name = "getHunterDataTable"

    def render(self, table: Dict[str, Any]) -> str:
        return f"function {self.function_name}() return {to_lua(table)} end\n"


_WRITERS = {"lua": LuaArtifactWriter, "json": JsonArtifactWriter}


def get_writer(output_format: str) -> ArtifactWriter:
    writer_class = _WRITERS.get(output_format)
    if not writer_class:
        raise ValueError(f"Artifact format '{output_format}' is not supported")
    return writer_class()
