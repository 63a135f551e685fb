"""
Job posting ingestion: fetch from the public job API, extract keywords once,
and swap the result into the job store.
"""
import asyncio
import logging
import uuid
from datetime import datetime, timedelta

import requests
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.config import settings
from jobmatch.database import SessionLocal
from jobmatch.schemas.job import JobPosting
from jobmatch.services.job_service import save_snapshot
from jobmatch.services.job_store import JobStore
from jobmatch.services.keyword_service import extract_keywords

logger = logging.getLogger(__name__)


class JobFetchError(RuntimeError):
    pass


def _first(raw: dict, *keys, default=None):
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return default


def _text(raw: dict, *keys, default=None):
    value = _first(raw, *keys, default=default)
    return None if value is None else str(value)


def to_posting(raw: dict) -> JobPosting:
    description = _text(raw, "description", "job_description", "contents", default="")
    return JobPosting(
        id=_text(raw, "id", default=uuid.uuid4()),
        title=_text(raw, "title", "name", default="Unknown Title"),
        company=_text(raw, "company_name", "company", default="Unknown Company"),
        description=description,
        url=_text(raw, "url", "job_url"),
        location=_text(raw, "candidate_required_location", "location", default="Remote"),
        keywords=tuple(extract_keywords(description, settings.job_keyword_limit)),
    )


def fetch_job_postings(search: str | None = None) -> list[JobPosting]:
    """Download up to ``settings.max_jobs`` postings and extract their keywords."""
    search = search or settings.job_search
    try:
        resp = requests.get(
            settings.job_api_url,
            params={"search": search},
            timeout=settings.fetch_timeout_seconds,
        )
        resp.raise_for_status()
        payload = resp.json()
    except requests.exceptions.RequestException as exc:
        raise JobFetchError(f"Job API request failed: {exc}") from exc
    except ValueError as exc:
        raise JobFetchError("Job API returned invalid JSON") from exc

    if not isinstance(payload, dict):
        raise JobFetchError("Job API returned an unexpected payload")
    raw_jobs = payload.get("jobs") or []
    if not isinstance(raw_jobs, list):
        raise JobFetchError("Job API returned an unexpected jobs list")

    postings: list[JobPosting] = []
    seen: set[str] = set()
    for raw in raw_jobs[: settings.max_jobs]:
        if not isinstance(raw, dict):
            logger.warning("Skipping malformed job record: %r", raw)
            continue
        posting = to_posting(raw)
        if posting.id in seen:
            continue
        seen.add(posting.id)
        postings.append(posting)
    return postings


def refresh_jobs(store: JobStore, db: Session | None = None, search: str | None = None) -> int:
    """Fetch postings, persist them and swap them into ``store``. Returns the count."""
    search = search or settings.job_search
    postings = fetch_job_postings(search)

    own_session = db is None
    db = db or SessionLocal()
    try:
        snapshot = store.replace(postings)
        try:
            save_snapshot(db, snapshot)
        except SQLAlchemyError as exc:
            # The in-memory snapshot is already live; only persistence failed
            logger.error("Could not persist %d fetched jobs: %s", len(postings), exc)
    finally:
        if own_session:
            db.close()

    logger.info("Fetched %d jobs for '%s'", len(postings), search)
    return len(postings)


def seconds_until(hour: int, minute: int, now: datetime | None = None) -> float:
    now = now or datetime.now()
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return (target - now).total_seconds()


async def run_daily_fetch(store: JobStore):
    """Refresh the job store every day at ``fetch_hour:fetch_minute`` server time."""
    while True:
        await asyncio.sleep(seconds_until(settings.fetch_hour, settings.fetch_minute))
        logger.info("Running scheduled job fetch...")
        try:
            await asyncio.to_thread(refresh_jobs, store)
        except Exception as exc:
            logger.error("Scheduled job fetch failed: %s", exc)
