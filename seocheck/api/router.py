from fastapi import APIRouter

from seocheck.api import analyze

router = APIRouter()
router.include_router(analyze.router, tags=["analyze"])
