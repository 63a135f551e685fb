from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from jobmatch.config import settings
from jobmatch.dependencies import get_job_store
from jobmatch.schemas.match import MatchRequest, MatchResponse, MatchResult, UploadMatchResponse
from jobmatch.services.extraction_service import UnsupportedDocumentError, extract_resume_text
from jobmatch.services.job_store import JobStore
from jobmatch.services.match_service import RankedJob, rank_jobs

router = APIRouter(prefix="/match", tags=["match"])


def _to_result(ranked: RankedJob) -> MatchResult:
    job = ranked.job
    return MatchResult(
        job_id=job.id,
        title=job.title,
        company=job.company,
        url=job.url,
        keywords=list(job.keywords),
        match_score=ranked.score.final,
        keyword_score=ranked.score.keyword_score,
        semantic_score=ranked.score.semantic_score,
    )


def _match(resume_text: str, store: JobStore) -> list[MatchResult]:
    snapshot = store.snapshot()
    return [_to_result(r) for r in rank_jobs(resume_text, snapshot.jobs)]


@router.post("", response_model=MatchResponse)
def match_resume(req: MatchRequest, store: JobStore = Depends(get_job_store)):
    if not req.resume_text.strip():
        raise HTTPException(status_code=400, detail="resume_text is required")
    return MatchResponse(results=_match(req.resume_text, store))


@router.post("/upload", response_model=UploadMatchResponse)
async def match_upload(
    resume: UploadFile = File(...),
    store: JobStore = Depends(get_job_store),
):
    max_bytes = settings.max_upload_bytes
    size = 0
    chunks: list[bytes] = []
    while True:
        chunk = await resume.read(1024 * 1024)
        if not chunk:
            break
        size += len(chunk)
        if size > max_bytes:
            raise HTTPException(status_code=413, detail=f"File too large (max {max_bytes} bytes)")
        chunks.append(chunk)

    content = b"".join(chunks)
    if not content:
        raise HTTPException(status_code=400, detail="Empty file")

    try:
        resume_text = extract_resume_text(content, resume.filename, resume.content_type)
    except UnsupportedDocumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return UploadMatchResponse(
        extracted_text_preview=resume_text[: settings.text_preview_chars],
        results=_match(resume_text, store),
    )
