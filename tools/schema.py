"""
Tool metadata: parameter descriptors and tool definitions.

A ToolDefinition is the single description of a tool's arguments. It renders
the MCP input schema advertised to clients and the pydantic model used to
validate incoming arguments, so both always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, List, Literal, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, create_model

PARAM_TYPES = ("string", "number", "boolean", "array")

_PY_TYPES: Dict[str, Any] = {
    "string": StrictStr,
    "number": Union[StrictInt, StrictFloat],
    "boolean": StrictBool,
    "array": List[StrictStr],
}


@dataclass(frozen=True)
class Param:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    default: Any = None
    enum: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.type not in PARAM_TYPES:
            raise ValueError(f"Param {self.name}: unsupported type {self.type!r}")
        if self.required and self.default is not None:
            raise ValueError(f"Param {self.name}: required params cannot declare a default")
        if self.enum is not None and self.type != "string":
            raise ValueError(f"Param {self.name}: enum values are only supported on strings")

    def json_schema(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.type == "array":
            out["items"] = {"type": "string"}
        if self.enum is not None:
            out["enum"] = list(self.enum)
        if self.description:
            out["description"] = self.description
        if self.default is not None:
            out["default"] = self.default
        return out

    def field(self) -> Tuple[Any, Any]:
        base = Literal[self.enum] if self.enum is not None else _PY_TYPES[self.type]
        if self.required:
            if self.type == "string" and self.enum is None:
                return base, Field(..., min_length=1)
            return base, Field(...)
        # optional params may be sent blank; blanks are handled by translation
        if self.enum is not None:
            base = Literal[self.enum + ("",)]
        elif self.type != "string":
            base = Union[base, Literal[""]]
        return Optional[base], Field(default=None)


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    params: Tuple[Param, ...] = ()

    def __post_init__(self) -> None:
        names = [p.name for p in self.params]
        if len(names) != len(set(names)):
            raise ValueError(f"Tool {self.name}: duplicate parameter names")

    @property
    def required(self) -> List[str]:
        return [p.name for p in self.params if p.required]

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": self.required,
        }

    def to_mcp(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema()}

    @cached_property
    def args_model(self) -> Type[BaseModel]:
        model_name = "".join(part.capitalize() for part in self.name.split("_")) + "Args"
        return create_model(
            model_name,
            __config__=ConfigDict(extra="ignore"),
            **{p.name: p.field() for p in self.params},
        )
