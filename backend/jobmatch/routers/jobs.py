from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobmatch.database import get_db
from jobmatch.dependencies import get_job_store
from jobmatch.schemas.job import JobListResponse, RefreshResponse
from jobmatch.services.fetch_service import JobFetchError, refresh_jobs
from jobmatch.services.job_store import JobStore

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(store: JobStore = Depends(get_job_store)):
    snapshot = store.snapshot()
    return JobListResponse(
        count=len(snapshot.jobs),
        last_fetch_at=snapshot.fetched_at,
        jobs=list(snapshot.jobs),
    )


@router.post("/refresh", response_model=RefreshResponse)
def refresh(
    search: str | None = None,
    store: JobStore = Depends(get_job_store),
    db: Session = Depends(get_db),
):
    try:
        fetched = refresh_jobs(store, db=db, search=search)
    except JobFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return RefreshResponse(fetched=fetched, last_fetch_at=store.snapshot().fetched_at)
