from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin, get_type_hints

JsonSchema = Dict[str, Any]

_SCALAR_TYPES = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
}


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        return _SCALAR_TYPES.get(annotation, "string")
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return _SCALAR_TYPES.get(origin, "string")


@dataclass(frozen=True)
class ToolFunction:
    """A deterministic timeline function exposed to external callers."""

    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]

    @property
    def signature(self) -> inspect.Signature:
        return inspect.signature(self.func)

    @property
    def parameter_schema(self) -> JsonSchema:
        hints = get_type_hints(self.func)
        properties: JsonSchema = {}
        required: list[str] = []
        for param in self.signature.parameters.values():
            prop: JsonSchema = {"type": _json_type(hints.get(param.name, str))}
            if param.default is inspect.Parameter.empty:
                required.append(param.name)
            elif isinstance(param.default, (str, int, float, bool)):
                prop["default"] = param.default
            properties[param.name] = prop

        schema: JsonSchema = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema,
            },
        }


REGISTRY: Dict[str, ToolFunction] = {}


def register_tool(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"Tool '{name}' is already registered.")
        REGISTRY[name] = ToolFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
        )
        return func

    return decorator


def get_tools(category: Optional[str] = None) -> List[ToolFunction]:
    return [tool for tool in REGISTRY.values() if category is None or tool.category == category]


def call_tool(name: str, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"Tool '{name}' is not registered.")
    return REGISTRY[name].func(**kwargs)
