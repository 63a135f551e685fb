import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobmatch.config import settings
from jobmatch.routers import generate, jobs, match
from jobmatch.services.job_store import job_store

VERSION = "0.1.0"
logger = logging.getLogger("jobmatch")


async def _initial_fetch():
    from jobmatch.services.fetch_service import refresh_jobs
    try:
        await asyncio.to_thread(refresh_jobs, job_store)
    except Exception as exc:
        logger.error("Job fetch failed: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.setLevel(settings.log_level.upper())

    # Startup: restore the last stored job snapshot
    from jobmatch.database import SessionLocal, init_db
    from jobmatch.services.job_service import load_snapshot
    from jobmatch.utils.filesystem import ensure_data_dir
    try:
        ensure_data_dir()
        init_db()
        db = SessionLocal()
        try:
            snapshot = load_snapshot(db)
        finally:
            db.close()
        if snapshot.jobs:
            job_store.replace(snapshot.jobs, fetched_at=snapshot.fetched_at)
    except Exception as exc:
        logger.error("Could not load stored jobs: %s", exc)

    tasks = []
    if settings.fetch_on_startup:
        tasks.append(asyncio.create_task(_initial_fetch()))
    if settings.fetch_schedule_enabled:
        from jobmatch.services.fetch_service import run_daily_fetch
        tasks.append(asyncio.create_task(run_daily_fetch(job_store)))
    yield
    # Shutdown: stop background fetches
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


app = FastAPI(
    title="Job Match",
    description="Résumé-to-job hybrid keyword and TF-IDF matching",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(match.router, prefix=settings.api_prefix)
app.include_router(generate.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "version": VERSION,
        "last_fetch_at": job_store.snapshot().fetched_at,
    }
