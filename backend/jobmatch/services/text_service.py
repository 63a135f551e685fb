"""
Text normalization shared by keyword extraction and similarity scoring.

Tokenization is pure and deterministic: the same text always yields the
same token list, which keeps scores reproducible and keyword caches valid.
"""
import re
from dataclasses import dataclass

from jobmatch.config import Settings, settings

_WHITESPACE_RE = re.compile(r"\s+")
# Keep tech tokens like C++, C#, node.js, front-end, snake_case
_DISALLOWED_RE = re.compile(r"[^a-zA-Z0-9 #+\-_.]")

MIN_TOKEN_LENGTH = 3


@dataclass(frozen=True)
class Lexicon:
    """Stop words and domain vocabulary injected into the scoring engine."""

    stop_words: frozenset[str]
    domain_vocabulary: frozenset[str]
    domain_boost: int = 4

    @classmethod
    def from_settings(cls, config: Settings) -> "Lexicon":
        return cls(
            stop_words=frozenset(config.stop_words),
            domain_vocabulary=frozenset(config.domain_vocabulary),
            domain_boost=config.domain_boost,
        )


def default_lexicon() -> Lexicon:
    return Lexicon.from_settings(settings)


def tokenize(text: str | None, lexicon: Lexicon | None = None) -> list[str]:
    """Split text into lowercase word tokens, dropping short tokens and stop words.

    A trailing "." is trimmed from each token so sentence-final words match
    ("painting." becomes "painting"); inner and leading dots are kept, so
    "node.js" and ".net" survive intact.
    """
    if not text:
        return []
    lexicon = lexicon or default_lexicon()

    cleaned = _WHITESPACE_RE.sub(" ", text)
    cleaned = _DISALLOWED_RE.sub(" ", cleaned).lower()

    tokens = []
    for raw in cleaned.split():
        token = raw.rstrip(".")  # sentence punctuation
        if len(token) < MIN_TOKEN_LENGTH or token in lexicon.stop_words:
            continue
        tokens.append(token)
    return tokens
