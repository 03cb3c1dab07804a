from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin

JsonSchema = Dict[str, Any]


class UnknownApiFunctionError(KeyError):
    """Raised when calling a name that was never registered."""


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        mapping = {
            str: "string",
            int: "integer",
            bool: "boolean",
            dict: "object",
            list: "array",
        }
        return mapping.get(annotation, "string")
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    return "string"


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for param in self.signature.parameters.values():
            prop: JsonSchema = {"type": _json_type(param.annotation)}
            if isinstance(param.default, (str, int, bool)):
                prop["default"] = param.default
            schema["properties"][param.name] = prop
            if param.default is inspect.Parameter.empty:
                schema["required"].append(param.name)
        return schema

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "parameters": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str = "calendar",
    tags: Optional[Iterable[str]] = None,
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
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return sorted(REGISTRY.values(), key=lambda item: item.name)


def call_api(name: str, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise UnknownApiFunctionError(f"API function '{name}' is not registered.")
    return REGISTRY[name].func(**kwargs)
