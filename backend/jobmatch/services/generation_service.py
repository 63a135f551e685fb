"""
Résumé tips, tailoring and cover letters via the OpenAI chat API.
Text in, text out; nothing here feeds back into scoring.
"""
import logging

from openai import OpenAI, OpenAIError

from jobmatch.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are an expert career coach."

TIPS_PROMPT = (
    "Analyze the resume below and provide concise, actionable improvement tips. "
    "Focus on ATS optimization, strong impact statements, formatting, relevant skill "
    "highlighting, and measurable results. Provide bullets and examples where possible."
    "\n\nRESUME:\n{resume}"
)

TAILOR_PROMPT = (
    "You are an expert resume writer and ATS specialist. Take the RESUME and rewrite it "
    "so that it's optimized for the following JOB DESCRIPTION. Emphasize relevant skills, "
    "reorder sections if necessary, convert responsibilities into achievement bullets "
    "(with metrics where plausible), and output the final resume in plain text."
    "\n\nJOB DESCRIPTION:\n{job_description}\n\nRESUME:\n{resume}"
)

COVER_LETTER_PROMPT = (
    "Write a professional, personalized cover letter addressed to the hiring manager at "
    "{company}. Use the applicant's resume and the job description to highlight the "
    "best-fit skills and achievements. Keep it concise (max 4 short paragraphs). "
    "Provide a strong closing and call-to-action."
    "\n\nJOB DESCRIPTION:\n{job_description}\n\nRESUME:\n{resume}"
)


class GenerationUnavailableError(RuntimeError):
    pass


class GenerationError(RuntimeError):
    pass


def _get_client() -> OpenAI:
    if not settings.openai_api_key:
        raise GenerationUnavailableError("OpenAI API key not configured")
    return OpenAI(api_key=settings.openai_api_key)


def complete(prompt: str, system: str = SYSTEM_PROMPT) -> str:
    client = _get_client()
    try:
        response = client.chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            max_tokens=settings.openai_max_tokens,
        )
    except OpenAIError as exc:
        logger.error("OpenAI request failed: %s", exc)
        raise GenerationError("Text generation failed") from exc

    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


def resume_tips(resume_text: str) -> str:
    return complete(TIPS_PROMPT.format(resume=resume_text))


def tailor_resume(resume_text: str, job_description: str) -> str:
    return complete(TAILOR_PROMPT.format(job_description=job_description, resume=resume_text))


def cover_letter(resume_text: str, job_description: str, company_name: str | None = None) -> str:
    return complete(COVER_LETTER_PROMPT.format(
        company=company_name or "the company",
        job_description=job_description,
        resume=resume_text,
    ))
