"""Question-to-FAQ matching.

Rules run in a fixed priority order and the first rule that yields a record
wins, even if a later rule would score some other record higher:

1. exact     normalized query equals a normalized question
2. contains  one normalized string is a substring of the other
3. keys      a curated record key appears in the query (tags or whole words)
4. overlap   most shared tokens between query and question, at least MIN_OVERLAP

Ties always go to the record listed first.
"""
import re
from dataclasses import dataclass
from typing import Any, Iterable, Literal

from faq_records import FaqRecord, coerce_records
from intents import IntentExpander
from normalization import TextNormalizer, stem
from similarity import bigram_dice, tfidf_scores

Rule = Literal["exact", "contains", "keys", "overlap", "none"]

MIN_OVERLAP = 1


@dataclass(frozen=True)
class MatchResult:
    record: FaqRecord | None
    rule: Rule
    debug: dict[str, Any] | None = None

    @property
    def matched(self) -> bool:
        return self.record is not None


def _in_text(text: str, needle: str) -> bool:
    # whole-word containment on normalized text
    return re.search(rf"(?:^|\s){re.escape(needle)}(?:\s|$)", text) is not None


class FaqMatcher:
    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        expander: IntentExpander | None = None,
        min_overlap: int = MIN_OVERLAP,
    ):
        self.normalizer = normalizer or TextNormalizer()
        self.expander = expander or IntentExpander()
        self.min_overlap = max(1, min_overlap)

    def _expanded_tokens(self, text: str) -> frozenset[str]:
        return self.expander.expand(self.normalizer.tokens(text), text)

    def _keys_hit(self, record: FaqRecord, query: str, expanded: frozenset[str]) -> bool:
        for key in record.keys:
            key = self.normalizer.normalize(key)
            if not key:
                continue
            if key in expanded or (" " not in key and stem(key) in expanded):
                return True
            if _in_text(query, key):
                return True
        return False

    def _pick(
        self, query: str, records: list[FaqRecord], expanded: frozenset[str]
    ) -> tuple[FaqRecord | None, Rule]:
        questions = [self.normalizer.normalize(r.question) for r in records]

        for record, question in zip(records, questions):
            if query == question:
                return record, "exact"

        # Plain substring test: a short query such as "do" lands on the first
        # question that contains it.
        for record, question in zip(records, questions):
            if question and (query in question or question in query):
                return record, "contains"

        for record in records:
            if self._keys_hit(record, query, expanded):
                return record, "keys"

        best: FaqRecord | None = None
        best_overlap = 0
        for record, question in zip(records, questions):
            overlap = len(expanded & self._expanded_tokens(question))
            if overlap > best_overlap:
                best, best_overlap = record, overlap
        if best is not None and best_overlap >= self.min_overlap:
            return best, "overlap"
        return None, "none"

    def _diagnostics(
        self, raw_query: str, query: str, records: list[FaqRecord], expanded: frozenset[str]
    ) -> list[dict[str, Any]]:
        tfidf = tfidf_scores(raw_query, [r.question for r in records])
        rows = []
        for record, score in zip(records, tfidf):
            question_tokens = self._expanded_tokens(self.normalizer.normalize(record.question))
            rows.append(
                {
                    "question": record.question,
                    "overlap": len(expanded & question_tokens),
                    "keys_hit": self._keys_hit(record, query, expanded),
                    "tfidf": score,
                    "dice": round(bigram_dice(raw_query, record.question), 4),
                }
            )
        return rows

    def match(self, query: str | None, records: Iterable[Any] | None, debug: bool = False) -> MatchResult:
        query_text = self.normalizer.normalize(query)
        usable = coerce_records(records)
        if not query_text or not usable:
            notes = None
            if debug:
                notes = {"query": query_text, "tokens": [], "intents": [], "rule": "none",
                         "records": len(usable), "scores": []}
            return MatchResult(record=None, rule="none", debug=notes)

        tokens = self.normalizer.tokens(query_text)
        expanded = self.expander.expand(tokens, query_text)
        record, rule = self._pick(query_text, usable, expanded)

        notes = None
        if debug:
            notes = {
                "query": query_text,
                "tokens": sorted(tokens),
                "intents": sorted(self.expander.intents(tokens, query_text)),
                "rule": rule,
                "records": len(usable),
                "scores": self._diagnostics(query or "", query_text, usable, expanded),
            }
        return MatchResult(record=record, rule=rule, debug=notes)


_default_matcher = FaqMatcher()


def match(query: str | None, records: Iterable[Any] | None, debug: bool = False) -> MatchResult:
    return _default_matcher.match(query, records, debug=debug)
