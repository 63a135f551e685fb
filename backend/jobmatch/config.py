from pathlib import Path
from pydantic_settings import BaseSettings

DEFAULT_STOP_WORDS = frozenset({
    "about", "above", "after", "again", "against", "all", "and", "any", "are",
    "because", "been", "before", "being", "below", "between", "both",
    "but", "can", "cannot", "could", "did", "does", "doing", "down", "during",
    "each", "few", "for", "from", "further", "had", "has", "have", "having",
    "her", "here", "hers", "herself", "him", "himself", "his", "how", "into",
    "its", "itself", "just", "more", "most", "myself", "nor", "not", "now",
    "off", "once", "only", "other", "ought", "our", "ours", "ourselves", "out",
    "over", "own", "same", "she", "should", "some", "such", "than", "that",
    "the", "their", "theirs", "them", "themselves", "then", "there", "these",
    "they", "this", "those", "through", "too", "under", "until", "very", "was",
    "were", "what", "when", "where", "which", "while", "who", "whom", "why",
    "will", "with", "would", "you", "your", "yours", "yourself", "yourselves",
    "also", "may", "might", "must", "shall", "upon", "etc", "via",
})

DEFAULT_DOMAIN_VOCABULARY = frozenset({
    "concept", "artist", "character", "2d", "illustration", "digital",
    "painting", "anatomy", "stylized", "environment", "sketch", "photoshop",
    "procreate", "color", "lighting", "render", "visual", "design",
    "composition", "story", "ideation",
})


class Settings(BaseSettings):
    data_path: Path = Path.home() / ".jobmatch"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    max_upload_bytes: int = 10 * 1024 * 1024  # 10 MiB
    text_preview_chars: int = 300

    # Job source
    job_api_url: str = "https://remotive.com/api/remote-jobs"
    job_search: str = "concept artist, 2d character artist"
    max_jobs: int = 30
    job_keyword_limit: int = 25
    fetch_timeout_seconds: float = 15.0
    fetch_on_startup: bool = True
    fetch_schedule_enabled: bool = True
    fetch_hour: int = 10
    fetch_minute: int = 30

    # Scoring lexicon and weights
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    domain_vocabulary: frozenset[str] = DEFAULT_DOMAIN_VOCABULARY
    domain_boost: int = 4
    keyword_weight: float = 0.4
    semantic_weight: float = 0.6

    # Generative text
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_max_tokens: int = 800

    @property
    def db_path(self) -> Path:
        return self.data_path / "jobs.sqlite"

    model_config = {"env_prefix": "JOBMATCH_"}


settings = Settings()
