"""Request/response API functions shared by the GUI, CLI, and HTTP server."""

from __future__ import annotations

from .registry import ApiFunction, UnknownApiFunctionError, call_api, get_api_functions, register_api
from .state import ApiState, api_state

# Import endpoint modules so their decorators register at import time.
from . import endpoints, meta  # noqa: F401

__all__ = [
    "ApiFunction",
    "ApiState",
    "UnknownApiFunctionError",
    "api_state",
    "call_api",
    "get_api_functions",
    "register_api",
]
