from jobmatch.models.job import Job

__all__ = ["Job"]
