from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class FaqRecord:
    question: str
    answer: str
    keys: tuple[str, ...] = ()


def _first_text(row: Mapping[str, Any], *names: str) -> str | None:
    for name in names:
        value = row.get(name)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _clean_keys(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(k.strip() for k in raw if isinstance(k, str) and k.strip())


def record_from_row(row: Any) -> FaqRecord | None:
    """Build a record from a JSON-shaped row, or None when the row is unusable.

    Accepts both the long field names (question/answer) and the short ones
    (q/a) used by older FAQ documents. A FaqRecord is returned as-is; a
    mapping always becomes a new record.
    """
    if isinstance(row, FaqRecord):
        return row
    if not isinstance(row, Mapping):
        return None
    question = _first_text(row, "question", "q")
    answer = _first_text(row, "answer", "a")
    if question is None or answer is None:
        return None
    return FaqRecord(question=question, answer=answer, keys=_clean_keys(row.get("keys")))


def coerce_records(rows: Iterable[Any] | None) -> list[FaqRecord]:
    if not rows:
        return []
    records: list[FaqRecord] = []
    for row in rows:
        record = record_from_row(row)
        if record is not None:
            records.append(record)
    return records
