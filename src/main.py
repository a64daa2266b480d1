import argparse
import json

from answer_formatter import format_fragment, format_payload
from faq_store import FaqStore
from logging_setup import setup_logging
from matcher import match
from settings import Settings


def main() -> int:
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Ask the FAQ widget a question from the terminal")
    parser.add_argument("--question-text", required=True, help="Question to match against the FAQs")
    parser.add_argument("--faqs", default=settings.faq_source, help="Path or http(s) URL of the FAQ JSON")
    parser.add_argument("--debug", action="store_true", help="Print match diagnostics")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the JSON payload instead of text")
    output.add_argument("--html", action="store_true", help="Print the HTML fragment the widget renders")
    args = parser.parse_args()

    setup_logging("DEBUG" if args.debug else settings.log_level)

    question_text = args.question_text.strip()
    if not question_text:
        raise SystemExit("Question text cannot be empty.")

    store = FaqStore(
        args.faqs,
        timeout=settings.fetch_timeout,
        max_retries=settings.fetch_retries,
        backoff=settings.fetch_backoff,
    )
    records = store.load()
    result = match(question_text, records, debug=args.debug)
    payload = format_payload(question_text, result, settings.fallback_answer)

    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0
    if args.html:
        print(format_fragment(question_text, payload["answer"]))
        return 0

    if args.debug and result.debug:
        print(f"[DEBUG] rule={result.rule} tokens={result.debug['tokens']} intents={result.debug['intents']}")
        print("[DEBUG] scores:")
        for i, row in enumerate(result.debug["scores"], start=1):
            print(
                f"  {i}. overlap={row['overlap']} keys={row['keys_hit']} "
                f"tfidf={row['tfidf']:.2f} dice={row['dice']:.2f} | {row['question']}"
            )

    if result.record is not None:
        print(f"Matched: {result.record.question} ({result.rule})")
    print("Answer:")
    print(payload["answer"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
