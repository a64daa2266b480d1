import re
from typing import AbstractSet

DEFAULT_STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "to", "of", "in", "on", "at", "for", "with", "by",
    "from", "about", "into", "as", "is", "are", "was", "were", "be", "been", "being", "am",
    "do", "does", "did", "can", "could", "will", "would", "should", "shall", "may", "might",
    "have", "has", "had", "i", "me", "my", "you", "your", "we", "our", "us", "it", "its",
    "this", "that", "these", "those", "how", "what", "which", "who", "whom", "why", "there",
})

# Suffixes are tried in order; the first that applies wins.
STEM_SUFFIXES = ("ers", "ing", "ed", "er", "ly", "s")
MIN_STEM_LENGTH = 3

_APOSTROPHE_RE = re.compile(r"['‘’‛ʼ`´′]")
_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")
_SPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    if not isinstance(text, str):
        return ""
    text = text.lower()
    text = _APOSTROPHE_RE.sub("", text)
    text = _NON_WORD_RE.sub(" ", text)
    return _SPACE_RE.sub(" ", text).strip()


def words(text: str | None) -> list[str]:
    return [w for w in normalize(text).split(" ") if w]


def stem(word: str) -> str:
    """Crude suffix stripping; 'business' keeps its trailing s."""
    for suffix in STEM_SUFFIXES:
        if not word.endswith(suffix):
            continue
        if suffix == "s" and word.endswith("ss"):
            return word
        if len(word) - len(suffix) < MIN_STEM_LENGTH:
            continue
        return word[: -len(suffix)]
    return word


class TextNormalizer:
    def __init__(self, stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS):
        self.stop_words = frozenset(stop_words)

    def normalize(self, text: str | None) -> str:
        return normalize(text)

    def tokens(self, text: str | None, drop_stop_words: bool = True) -> frozenset[str]:
        result = set()
        for word in words(text):
            if drop_stop_words and word in self.stop_words:
                continue
            result.add(stem(word))
        return frozenset(result)
