from pydantic import BaseModel, ConfigDict


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str | None = None
    url: str | None = None

    @property
    def has_input(self) -> bool:
        return bool(self.content or self.url)

    @property
    def mode(self) -> str:
        return "url" if (self.url or "").strip() else "text"
