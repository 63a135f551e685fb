from fastapi import APIRouter, HTTPException

from jobmatch.schemas.generate import (
    CoverLetterRequest,
    CoverLetterResponse,
    ResumeTipsRequest,
    ResumeTipsResponse,
    TailorResumeRequest,
    TailorResumeResponse,
)
from jobmatch.services import generation_service
from jobmatch.services.generation_service import GenerationError, GenerationUnavailableError

router = APIRouter(prefix="/generate", tags=["generate"])


def _generate(func, *args) -> str:
    try:
        return func(*args)
    except GenerationUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def _require(**fields: str):
    missing = [name for name, value in fields.items() if not value.strip()]
    if missing:
        raise HTTPException(status_code=400, detail=f"{' and '.join(missing)} required")


@router.post("/resume-tips", response_model=ResumeTipsResponse)
def resume_tips(req: ResumeTipsRequest):
    _require(resume_text=req.resume_text)
    return ResumeTipsResponse(tips=_generate(generation_service.resume_tips, req.resume_text))


@router.post("/tailor-resume", response_model=TailorResumeResponse)
def tailor_resume(req: TailorResumeRequest):
    _require(resume_text=req.resume_text, job_description=req.job_description)
    tailored = _generate(generation_service.tailor_resume, req.resume_text, req.job_description)
    return TailorResumeResponse(tailored_resume=tailored)


@router.post("/cover-letter", response_model=CoverLetterResponse)
def cover_letter(req: CoverLetterRequest):
    _require(resume_text=req.resume_text, job_description=req.job_description)
    letter = _generate(
        generation_service.cover_letter,
        req.resume_text,
        req.job_description,
        req.company_name,
    )
    return CoverLetterResponse(cover_letter=letter)
