from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...api import UnknownApiFunctionError, call_api, get_api_functions
from ...domain import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

app = FastAPI(title="Desk Calendar Local API", version="0.1.0")


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/api/functions")
def list_api_functions() -> JSONResponse:
    return JSONResponse({"functions": [func.describe() for func in get_api_functions()]})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except UnknownApiFunctionError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except NotFoundError as exc:
        logger.info("API function %s: %s", function_name, exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (ValidationError, TypeError) as exc:
        logger.info("API function %s rejected arguments: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Desk Calendar API on http://%s:%s", host, port)
    asyncio.run(serve(app, config))
