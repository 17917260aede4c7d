from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError

from seocheck.core.errors import InputContractError
from seocheck.core.logging import get_logger
from seocheck.schemas.analyze import AnalyzeRequest
from seocheck.services.analysis import AnalysisService, get_analysis_service
from seocheck.utils.request_body import read_json_body

router = APIRouter()
logger = get_logger(__name__)


@router.post("/analyze")
async def analyze_content(
    request: Request,
    service: AnalysisService = Depends(get_analysis_service),
):
    payload = await read_json_body(request)
    try:
        body = AnalyzeRequest.model_validate(payload)
    except ValidationError as exc:
        raise InputContractError("Content and URL must be strings.", details=str(exc)) from exc

    start = time.perf_counter()
    report = await service.analyze(body)
    logger.info(
        "analysis_completed",
        backend=service.backend,
        mode=body.mode,
        latency_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return ORJSONResponse(content=report)
