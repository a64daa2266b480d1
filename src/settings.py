import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_FALLBACK_ANSWER = "Great question — we'll follow up with a tailored answer."


def _load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def _ensure_env_loaded() -> None:
    _load_env_file(Path.cwd() / ".env")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, default)
    if value is None:
        return None
    value = value.strip()
    return value if value else default


def _get_number(name: str, default: str, kind: type) -> float | int:
    raw = _get_env(name, default) or default
    try:
        return kind(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}.") from None


@dataclass(frozen=True)
class Settings:
    faq_source: str
    cache_ttl: float
    fetch_timeout: float
    fetch_retries: int
    fetch_backoff: float
    fallback_answer: str
    log_level: str
    cors_origins: tuple[str, ...]
    site_dir: str | None

    @classmethod
    def from_env(cls) -> "Settings":
        _ensure_env_loaded()
        cors_raw = _get_env("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000") or ""
        return cls(
            faq_source=_get_env("FAQ_SOURCE", "data/faqs.json") or "data/faqs.json",
            cache_ttl=_get_number("FAQ_CACHE_TTL", "0", float),
            fetch_timeout=_get_number("FAQ_FETCH_TIMEOUT", "10", float),
            fetch_retries=_get_number("FAQ_FETCH_RETRIES", "3", int),
            fetch_backoff=_get_number("FAQ_FETCH_BACKOFF", "0.5", float),
            fallback_answer=_get_env("FALLBACK_ANSWER", DEFAULT_FALLBACK_ANSWER) or DEFAULT_FALLBACK_ANSWER,
            log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
            cors_origins=tuple(o.strip() for o in cors_raw.split(",") if o.strip()),
            site_dir=_get_env("SITE_DIR"),
        )
