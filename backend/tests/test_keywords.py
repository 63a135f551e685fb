from jobmatch.services.keyword_service import extract_keywords
from jobmatch.services.text_service import Lexicon


class TestExtractKeywords:
    def test_domain_boost_outranks_raw_frequency(self):
        text = "concept concept artist artist artist design design design design"
        assert extract_keywords(text, limit=2) == ["design", "artist"]

    def test_boost_applies_per_occurrence(self, lexicon):
        # design: 1 x 4 = 4, painting: 3 x 1 = 3
        text = "painting painting painting design"
        assert extract_keywords(text, limit=2, lexicon=lexicon) == ["design", "painting"]

    def test_unboosted_words_need_more_occurrences(self, lexicon):
        # python: 5, artist: 4
        text = "python python python python python artist"
        assert extract_keywords(text, limit=2, lexicon=lexicon) == ["python", "artist"]

    def test_ties_keep_first_seen_order(self, lexicon):
        text = "zebra mango apple mango zebra apple"
        assert extract_keywords(text, limit=3, lexicon=lexicon) == ["zebra", "mango", "apple"]

    def test_limit_respected(self, lexicon):
        text = "one1 two2 three3 four4 five5"
        assert len(extract_keywords(text, limit=3, lexicon=lexicon)) == 3

    def test_distinct(self, lexicon):
        keywords = extract_keywords("artist artist artist", limit=5, lexicon=lexicon)
        assert keywords == ["artist"]

    def test_empty_text(self):
        assert extract_keywords("", limit=5) == []
        assert extract_keywords(None, limit=5) == []

    def test_non_positive_limit(self, lexicon):
        assert extract_keywords("artist design", limit=0, lexicon=lexicon) == []

    def test_keywords_are_surviving_tokens(self, lexicon):
        keywords = extract_keywords("The artist and the designer, with a pen", limit=10, lexicon=lexicon)
        assert keywords == ["artist", "designer", "pen"]

    def test_custom_boost(self):
        lex = Lexicon(stop_words=frozenset(), domain_vocabulary=frozenset({"design"}), domain_boost=1)
        assert extract_keywords("painting painting design", limit=1, lexicon=lex) == ["painting"]
