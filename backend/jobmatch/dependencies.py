from jobmatch.services.job_store import JobStore, job_store


def get_job_store() -> JobStore:
    return job_store
