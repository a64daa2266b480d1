from typing import Any

from matcher import MatchResult
from settings import DEFAULT_FALLBACK_ANSWER

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

EMPTY_QUESTION_PLACEHOLDER = "…"

_FRAGMENT = """
<div class="demo-msg user">
  <div class="avatar">🧑</div>
  <div class="bubble">{question}</div>
</div>
<div class="demo-msg ai">
  <div class="avatar">🤖</div>
  <div class="bubble">{answer}</div>
</div>
"""


def escape_html(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(c, c) for c in text)


def answer_text(result: MatchResult, fallback: str = DEFAULT_FALLBACK_ANSWER) -> str:
    if result.record is None:
        return fallback
    return result.record.answer


def format_fragment(raw_query: str, answer: str) -> str:
    """Render the user/assistant chat bubbles the widget swaps into the page."""
    question = raw_query.strip() or EMPTY_QUESTION_PLACEHOLDER
    return _FRAGMENT.format(question=escape_html(question), answer=escape_html(answer))


def format_payload(raw_query: str, result: MatchResult, fallback: str = DEFAULT_FALLBACK_ANSWER) -> dict[str, Any]:
    return {
        "query": raw_query,
        "answer": answer_text(result, fallback),
        "matched": result.matched,
        "rule": result.rule,
        "question": result.record.question if result.record else None,
        "debug": result.debug,
    }
