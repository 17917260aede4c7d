from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
    status: int | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
