from types import MappingProxyType
from typing import AbstractSet, Iterable, Mapping

from normalization import normalize, stem

DEFAULT_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "hours": ("hour", "hours", "open", "opening", "availability", "business hours", "when", "time"),
    "pricing": ("price", "prices", "cost", "fee", "fees", "charge", "charges", "how much"),
    "support": (
        "support", "help", "maintenance", "break", "breaks", "broken", "fix", "repair",
        "issue", "bug", "warranty",
    ),
    "timeline": (
        "timeline", "timeframe", "turnaround", "delivery", "deadline", "schedule", "how long",
        "soon",
    ),
    "consult": ("consultation", "discovery", "call", "meeting", "book"),
})


class IntentExpander:
    """Adds canonical intent tags to a token set.

    Multi-word synonyms ("how long", "business hours") are looked up as
    substrings of the normalized text. Single words are compared against the
    token set and against the raw words of the text, so synonyms that are
    also stop words ("when") still count.
    """

    def __init__(self, synonyms: Mapping[str, Iterable[str]] = DEFAULT_SYNONYMS):
        phrases: dict[str, tuple[str, ...]] = {}
        singles: dict[str, frozenset[str]] = {}
        for tag, surface_forms in synonyms.items():
            normalized = [normalize(s) for s in surface_forms]
            normalized = [s for s in normalized if s]
            phrases[tag] = tuple(s for s in normalized if " " in s)
            single = {s for s in normalized if " " not in s}
            singles[tag] = frozenset(single | {stem(s) for s in single})
        self.phrases = MappingProxyType(phrases)
        self.singles = MappingProxyType(singles)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self.phrases)

    def intents(self, tokens: AbstractSet[str], text: str = "") -> frozenset[str]:
        text = normalize(text)
        text_words = set(text.split(" ")) if text else set()
        found = set()
        for tag in self.phrases:
            if any(p in text for p in self.phrases[tag]):
                found.add(tag)
                continue
            single = self.singles[tag]
            if not single.isdisjoint(tokens) or not single.isdisjoint(text_words):
                found.add(tag)
        return frozenset(found)

    def expand(self, tokens: AbstractSet[str], text: str = "") -> frozenset[str]:
        return frozenset(tokens) | self.intents(tokens, text)
