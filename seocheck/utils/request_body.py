from __future__ import annotations

import json
from typing import Any

from fastapi import Request
from starlette.requests import ClientDisconnect

from seocheck.core.errors import AnalysisServiceError, InputContractError


class ClientDisconnectedError(AnalysisServiceError):
    status_code = 499
    message = "Client disconnected"


async def read_json_body(request: Request) -> dict[str, Any]:
    body = await _read_bytes(request)
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputContractError("Invalid JSON body") from exc

    if not isinstance(payload, dict):
        raise InputContractError("JSON body must be an object")

    return payload


async def _read_bytes(request: Request) -> bytes:
    try:
        return await request.body()
    except ClientDisconnect as exc:
        raise ClientDisconnectedError() from exc
