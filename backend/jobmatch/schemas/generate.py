from pydantic import BaseModel


class ResumeTipsRequest(BaseModel):
    resume_text: str = ""


class TailorResumeRequest(BaseModel):
    resume_text: str = ""
    job_description: str = ""


class CoverLetterRequest(BaseModel):
    resume_text: str = ""
    job_description: str = ""
    company_name: str | None = None


class ResumeTipsResponse(BaseModel):
    tips: str


class TailorResumeResponse(BaseModel):
    tailored_resume: str


class CoverLetterResponse(BaseModel):
    cover_letter: str
