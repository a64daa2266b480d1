from intents import DEFAULT_SYNONYMS, IntentExpander
from normalization import TextNormalizer

normalizer = TextNormalizer()
expander = IntentExpander()


def _expand(text):
    tokens = normalizer.tokens(text)
    return tokens, expander.expand(tokens, text)


def test_phrase_synonym_adds_tag():
    tokens, expanded = _expand("how long does setup take")
    assert "timeline" in expanded
    assert tokens <= expanded


def test_single_word_synonym_adds_tag():
    _, expanded = _expand("my site is broken")
    assert "support" in expanded


def test_stemmed_synonym_adds_tag():
    _, expanded = _expand("what are the charges")
    assert "pricing" in expanded


def test_stop_word_synonym_still_counts():
    assert "hours" in expander.intents(frozenset(), "when")


def test_no_partial_word_tags():
    assert expander.intents(normalizer.tokens("supportive staff"), "supportive staff") == frozenset()


def test_expansion_is_additive():
    tokens = frozenset({"xyz", "abc"})
    assert expander.expand(tokens, "xyz abc") == tokens


def test_custom_synonyms():
    custom = IntentExpander({"shipping": ["ship", "delivery time"]})
    assert custom.intents(frozenset(), "what is the delivery time") == frozenset({"shipping"})
    assert custom.tags == ("shipping",)


def test_default_tags():
    assert set(expander.tags) == set(DEFAULT_SYNONYMS)
