import pytest

from faq_records import FaqRecord
from intents import IntentExpander
from matcher import FaqMatcher, match


def test_scenario_exact_question():
    result = match("what are your hours", [{"question": "What are your hours?", "answer": "9-5 CT"}])
    assert result.rule == "exact"
    assert result.record.answer == "9-5 CT"


def test_scenario_key_synonym():
    records = [{"question": "pricing", "answer": "$997", "keys": ["cost", "price"]}]
    result = match("how much does it cost", records)
    assert result.rule == "keys"
    assert result.record.answer == "$997"


def test_scenario_intent_overlap():
    records = [{"question": "Do you offer support?", "answer": "Yes, 30-day support."}]
    result = match("my site is broken, who do I contact", records)
    assert result.rule == "overlap"
    assert result.record.answer == "Yes, 30-day support."


def test_scenario_no_match():
    result = match("xyz unrelated gibberish", [{"question": "Timeline", "answer": "5-7 days"}])
    assert result.rule == "none"
    assert result.record is None
    assert not result.matched


def test_every_question_matches_itself_exactly(site_faqs):
    for record in site_faqs:
        result = match(f"  {record.question.upper()}!! ", site_faqs)
        assert result.rule == "exact"
        assert result.record is record


def test_exact_duplicates_return_first():
    first = FaqRecord("Hours?", "first")
    second = FaqRecord("hours", "second")
    assert match("HOURS", [first, second]).record is first


@pytest.mark.parametrize("query", ["", "   ", "\n\t", "?!", None])
def test_empty_query_is_no_match(query, site_faqs):
    result = match(query, site_faqs)
    assert result.rule == "none"
    assert result.record is None


@pytest.mark.parametrize("records", [[], None, [None, {"question": "missing answer"}]])
def test_no_records_is_no_match(records):
    assert match("what are your hours", records).rule == "none"


def test_malformed_records_are_skipped():
    records = [None, 42, {"answer": "orphan"}, {"q": "What are your hours?", "a": "9-5"}]
    result = match("What are your hours?", records)
    assert result.rule == "exact"
    assert result.record.answer == "9-5"


def test_contains_either_direction():
    records = [FaqRecord("Do you build websites for restaurants?", "Yes.")]
    assert match("build websites", records).rule == "contains"
    assert match("so do you build websites for restaurants today", records).rule == "contains"


def test_contains_beats_keys():
    keyed = FaqRecord("Book a call", "call answer", ("cost",))
    contained = FaqRecord("cost of a website", "cost answer")
    result = match("cost", [keyed, contained])
    assert result.rule == "contains"
    assert result.record is contained


def test_key_needs_a_whole_word():
    records = [FaqRecord("Maintenance plans", "M", ("support",))]
    assert match("supportive staff", records).rule == "none"
    result = match("need support please", records)
    assert result.rule == "keys"
    assert result.record is records[0]


def test_multi_word_key():
    records = [FaqRecord("Office", "9-5", ("business hours",))]
    assert match("what are your business hours", records).rule == "keys"


def test_key_matches_intent_tag(site_faqs):
    result = match("how soon can you deliver", site_faqs)
    assert result.rule == "keys"
    assert result.record.answer == "5-7 days"


def test_overlap_tie_goes_to_first():
    first = FaqRecord("Website design packages", "A")
    second = FaqRecord("Website hosting packages", "B")
    result = match("website packages please", [first, second])
    assert result.rule == "overlap"
    assert result.record is first


def test_overlap_picks_highest_score():
    records = [FaqRecord("Website design", "A"), FaqRecord("Website design packages", "B")]
    result = match("design packages website", records)
    assert result.rule == "overlap"
    assert result.record.answer == "B"


def test_overlap_threshold():
    records = [FaqRecord("Website design", "A")]
    assert match("website cost", records).rule == "overlap"
    assert FaqMatcher(min_overlap=2).match("website cost", records).rule == "none"


def test_injected_synonyms():
    matcher = FaqMatcher(expander=IntentExpander({"pricing": ["quote"]}))
    records = [FaqRecord("Packages", "$997", ("pricing",))]
    assert matcher.match("can I get a quote", records).rule == "keys"
    assert match("can I get a quote", records).rule == "none"


def test_match_is_deterministic(site_faqs):
    queries = ["how much is it", "are you open saturday", "it broke", "hello there", ""]
    first = [match(q, site_faqs) for q in queries]
    second = [match(q, site_faqs) for q in queries]
    assert first == second


def test_debug_notes(site_faqs):
    result = match("how much does it cost", site_faqs, debug=True)
    assert result.debug["rule"] == result.rule == "keys"
    assert "pricing" in result.debug["intents"]
    assert "cost" in result.debug["tokens"]
    assert len(result.debug["scores"]) == len(site_faqs)
    row = result.debug["scores"][2]
    assert row["question"] == "How much does a project cost?"
    assert row["keys_hit"] is True
    assert row["tfidf"] > 0
    assert match("how much does it cost", site_faqs).debug is None


def test_debug_notes_for_empty_query(site_faqs):
    result = match("  ", site_faqs, debug=True)
    assert result.debug["rule"] == "none"
    assert result.debug["scores"] == []


def test_short_query_takes_first_containing_question(site_faqs):
    result = match("do", site_faqs)
    assert result.rule == "contains"
    assert result.record is site_faqs[0]
