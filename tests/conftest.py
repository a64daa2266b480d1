import pytest

from faq_records import FaqRecord


@pytest.fixture
def site_faqs() -> list[FaqRecord]:
    return [
        FaqRecord("What do you do?", "We build automation systems.", ("services", "automation")),
        FaqRecord("What are your hours?", "9-5 CT", ("hours", "open")),
        FaqRecord("How much does a project cost?", "$997", ("pricing", "cost", "price")),
        FaqRecord("Do you offer support after launch?", "30-day support.", ("support",)),
        FaqRecord("How long does a build take?", "5-7 days", ("timeline",)),
    ]
