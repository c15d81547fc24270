from pydantic import BaseModel


class SiteError(BaseModel):
    file: str
    error: str


class SiteReport(BaseModel):
    scanned: int = 0
    rewritten: int = 0
    diagrams: int = 0
    skipped: int = 0
    fallbacks: int = 0  # unparseable files left as they were
    errors: list[SiteError] = []
    duration: float = 0.0
