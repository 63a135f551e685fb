from pydantic import BaseModel


class MatchRequest(BaseModel):
    resume_text: str = ""


class MatchResult(BaseModel):
    job_id: str
    title: str
    company: str
    url: str | None
    keywords: list[str]
    match_score: int
    keyword_score: int
    semantic_score: int


class MatchResponse(BaseModel):
    results: list[MatchResult]


class UploadMatchResponse(MatchResponse):
    extracted_text_preview: str
