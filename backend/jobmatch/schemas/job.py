from pydantic import BaseModel, ConfigDict


class JobPosting(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    company: str
    description: str = ""
    url: str | None = None
    location: str = "Remote"
    keywords: tuple[str, ...] = ()


class JobListResponse(BaseModel):
    count: int
    last_fetch_at: str | None
    jobs: list[JobPosting]


class RefreshResponse(BaseModel):
    fetched: int
    last_fetch_at: str | None
