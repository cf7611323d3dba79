from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union, get_args, get_origin

JsonSchema = Dict[str, Any]

_JSON_TYPES = {
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
        return _JSON_TYPES.get(annotation, "string")
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return "string"


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature
    parameter_docs: Mapping[str, str] = field(default_factory=dict)

    @property
    def parameters(self) -> Dict[str, str]:
        return {param.name: inspect.formatannotation(param.annotation) for param in self.signature.parameters.values()}

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for param in self.signature.parameters.values():
            prop: JsonSchema = {"type": _json_type(param.annotation)}
            if param.name in self.parameter_docs:
                prop["description"] = self.parameter_docs[param.name]
            if param.default is inspect.Parameter.empty:
                schema["required"].append(param.name)
            elif isinstance(param.default, (str, int, float, bool)):
                prop["default"] = param.default
            schema["properties"][param.name] = prop
        if not schema["required"]:
            schema.pop("required")
        return schema

    def summary(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "parameters": self.parameters,
        }

    def as_tool(self) -> Dict[str, Any]:
        """Render as an OpenAI-style function tool definition."""

        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema,
            },
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
    parameter_docs: Optional[Mapping[str, str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func, eval_str=True),
            parameter_docs=dict(parameter_docs or {}),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return sorted(REGISTRY.values(), key=lambda item: item.name)


def call_api(name: str, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    return REGISTRY[name].func(**kwargs)
