from jobmatch.services.text_service import Lexicon, default_lexicon, tokenize


def extract_keywords(text: str | None, limit: int = 20, lexicon: Lexicon | None = None) -> list[str]:
    """
    Rank the distinct tokens of a document by weighted frequency.

    Tokens in the domain vocabulary count ``lexicon.domain_boost`` per
    occurrence, everything else counts 1. Ties keep first-seen order.
    """
    if limit <= 0:
        return []
    lexicon = lexicon or default_lexicon()

    weights: dict[str, int] = {}
    for token in tokenize(text, lexicon):
        boost = lexicon.domain_boost if token in lexicon.domain_vocabulary else 1
        weights[token] = weights.get(token, 0) + boost

    # sorted() is stable and dicts keep insertion order
    ranked = sorted(weights.items(), key=lambda item: item[1], reverse=True)
    return [term for term, _ in ranked[:limit]]
