"""
Hybrid résumé-to-job match scoring.
Keyword overlap plus TF-IDF cosine similarity, fully offline.
"""
import math
from collections.abc import Iterable, Sequence
from concurrent.futures import Executor
from dataclasses import dataclass

from jobmatch.config import settings
from jobmatch.schemas.job import JobPosting
from jobmatch.services.similarity_service import build_tfidf_vectors, cosine_similarity
from jobmatch.services.text_service import Lexicon, default_lexicon, tokenize


@dataclass(frozen=True)
class MatchWeights:
    keyword: float = 0.4
    semantic: float = 0.6

    @classmethod
    def from_settings(cls) -> "MatchWeights":
        return cls(keyword=settings.keyword_weight, semantic=settings.semantic_weight)


@dataclass(frozen=True)
class MatchScore:
    final: int
    keyword_score: int
    semantic_score: int


@dataclass(frozen=True)
class RankedJob:
    job: JobPosting
    score: MatchScore


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def semantic_similarity(resume_text: str | None, job_description: str | None,
                        lexicon: Lexicon | None = None) -> int:
    """TF-IDF cosine similarity of two texts as a 0-100 percentage."""
    resume_tokens = tokenize(resume_text, lexicon)
    job_tokens = tokenize(job_description, lexicon)
    if not resume_tokens or not job_tokens:
        return 0

    vec_resume, vec_job = build_tfidf_vectors(resume_tokens, job_tokens)
    similarity = min(cosine_similarity(vec_resume, vec_job), 1.0)
    return round_half_up(similarity * 100)


def keyword_match_percentage(resume_text: str | None, job_keywords: Sequence[str],
                             lexicon: Lexicon | None = None) -> int:
    """Share of the job's keywords that occur anywhere in the résumé."""
    if not job_keywords:
        return 0
    resume_tokens = set(tokenize(resume_text, lexicon))
    matched = sum(1 for keyword in job_keywords if keyword in resume_tokens)
    return round_half_up(matched / len(job_keywords) * 100)


def final_match_score(resume_text: str | None, job: JobPosting,
                      weights: MatchWeights | None = None,
                      lexicon: Lexicon | None = None) -> MatchScore:
    weights = weights or MatchWeights.from_settings()
    kw_score = keyword_match_percentage(resume_text, job.keywords, lexicon)
    sem_score = semantic_similarity(resume_text, job.description, lexicon)
    final = round_half_up(kw_score * weights.keyword + sem_score * weights.semantic)
    return MatchScore(final=final, keyword_score=kw_score, semantic_score=sem_score)


def rank_jobs(resume_text: str | None, jobs: Iterable[JobPosting],
              weights: MatchWeights | None = None,
              lexicon: Lexicon | None = None,
              executor: Executor | None = None) -> list[RankedJob]:
    """
    Score every job against the résumé and order them best first.

    ``jobs`` should be a snapshot; it is read once and never mutated. With
    an executor the per-job scores are computed in parallel. Ties keep the
    input order, which is the source's recency order.
    """
    snapshot = tuple(jobs)
    weights = weights or MatchWeights.from_settings()
    lexicon = lexicon or default_lexicon()

    def score(job: JobPosting) -> RankedJob:
        return RankedJob(job=job, score=final_match_score(resume_text, job, weights, lexicon))

    # Executor.map yields results in input order
    mapper = executor.map if executor is not None else map
    ranked = list(mapper(score, snapshot))
    ranked.sort(key=lambda r: r.score.final, reverse=True)
    return ranked
