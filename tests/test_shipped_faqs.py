from pathlib import Path

import pytest

from faq_store import FaqStore
from matcher import match

FAQ_PATH = Path(__file__).resolve().parents[1] / "data" / "faqs.json"


@pytest.fixture(scope="module")
def shipped_faqs():
    records = FaqStore(FAQ_PATH).load()
    assert records, "data/faqs.json should load"
    return records


@pytest.mark.parametrize(
    "query, question",
    [
        ("what services do you provide", "What do you do?"),
        ("when are you open", "What are your hours?"),
        ("how much will it cost", "How much does a project cost?"),
        ("do you offer maintenance", "Do you offer support after launch?"),
        (
            "do you offer ongoing maintenance after the site is live",
            "Do you offer support after launch?",
        ),
        ("my website is broken", "Do you offer support after launch?"),
        ("can you help fix a bug", "Do you offer support after launch?"),
        ("how long until my site is ready", "How long does a build take?"),
        ("I'd like to book a consultation", "Can I book a discovery call?"),
    ],
)
def test_typical_questions_reach_their_faq(shipped_faqs, query, question):
    result = match(query, shipped_faqs)
    assert result.record is not None
    assert result.record.question == question
