from __future__ import annotations

from typing import Dict, List

from .registry import get_api_functions, register_api


@register_api(
    "list_available_tools",
    description="List every registered calendar API function with its description and parameters.",
    category="meta",
    tags=("tools", "metadata"),
)
def list_available_tools() -> Dict[str, List[dict]]:
    return {"tools": [func.describe() for func in get_api_functions()]}
