import json
import logging

from sqlalchemy.orm import Session

from jobmatch.models.job import Job
from jobmatch.schemas.job import JobPosting
from jobmatch.services.job_store import JobSnapshot

logger = logging.getLogger(__name__)


def _row_to_posting(row: Job) -> JobPosting:
    return JobPosting(
        id=row.id,
        title=row.title,
        company=row.company,
        description=row.description or "",
        url=row.url,
        location=row.location or "Remote",
        keywords=tuple(json.loads(row.keywords or "[]")),
    )


def save_snapshot(db: Session, snapshot: JobSnapshot):
    """Replace the stored jobs with the given snapshot in one transaction."""
    try:
        db.query(Job).delete()
        for position, posting in enumerate(snapshot.jobs):
            db.add(Job(
                id=posting.id,
                position=position,
                title=posting.title,
                company=posting.company,
                description=posting.description,
                url=posting.url,
                location=posting.location,
                keywords=json.dumps(list(posting.keywords)),
                fetched_at=snapshot.fetched_at,
            ))
        db.commit()
    except Exception:
        db.rollback()
        raise


def load_snapshot(db: Session) -> JobSnapshot:
    rows = db.query(Job).order_by(Job.position).all()
    if not rows:
        return JobSnapshot()
    fetched_at = max(r.fetched_at for r in rows)
    logger.info("Loaded %d stored jobs fetched at %s", len(rows), fetched_at)
    return JobSnapshot(jobs=tuple(_row_to_posting(r) for r in rows), fetched_at=fetched_at)
