from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from cardsmith.core.exceptions import CardsmithError
from cardsmith.core.logging import setup_logging
from cardsmith.modules.flashcards.export import to_csv
from cardsmith.modules.flashcards.importer import read_text_file
from cardsmith.modules.flashcards.main import FlashcardsGenerator
from cardsmith.modules.flashcards.models import FlashcardSet
from cardsmith.modules.flashcards.parser import parse_flashcards
from cardsmith.modules.flashcards.prompts import build_prompt, prompt_kind


def _load_topic(args: argparse.Namespace) -> str:
    if args.topic and args.topic_file:
        raise SystemExit("Provide either --topic or --topic-file, not both")
    if args.topic_file:
        return read_text_file(args.topic_file)
    if args.topic:
        return args.topic
    raise SystemExit("--topic or --topic-file is required")


def _render(cards: FlashcardSet, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(cards.model_dump()["flashcards"], indent=2, ensure_ascii=False) + "\n"
    return to_csv(cards)


def _write(content: str, output: str | None) -> None:
    if output:
        Path(output).write_text(content, encoding="utf-8")
        print(f"Wrote {output}", file=sys.stderr)
    else:
        sys.stdout.write(content)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cardsmith-flashcards", description="Flashcards generator CLI"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards for a topic, text or URL")
    g.add_argument("--topic", "-t", help="Topic, block of text, or URL")
    g.add_argument("--topic-file", help="Path to a text file used verbatim as the topic")
    g.add_argument("--model", help="Model identifier (default: FLASHCARDS_MODEL)")
    g.add_argument("--format", "-f", choices=("csv", "json"), default="csv")
    g.add_argument("--output", "-o", help="Write to this file instead of stdout")

    p = sub.add_parser("parse", help="Parse a saved model reply without calling the model")
    p.add_argument("--input", "-i", required=True, help="File holding the raw reply")
    p.add_argument("--format", "-f", choices=("csv", "json"), default="csv")
    p.add_argument("--output", "-o", help="Write to this file instead of stdout")

    pr = sub.add_parser("prompt", help="Print the prompt that would be sent")
    pr.add_argument("--topic", "-t", required=True)

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.cmd == "generate":
            topic = _load_topic(args)
            svc = FlashcardsGenerator(model=args.model)
            result = svc.generate_sync(topic)
            _write(_render(result.flashcard_set, args.format), args.output)
            return 0
        if args.cmd == "parse":
            cards = parse_flashcards(read_text_file(args.input))
            if cards.is_empty:
                print("No valid flashcards found in the input.", file=sys.stderr)
                return 1
            _write(_render(cards, args.format), args.output)
            return 0
        if args.cmd == "prompt":
            topic = args.topic.strip()
            print(f"# kind: {prompt_kind(topic)}", file=sys.stderr)
            print(build_prompt(topic))
            return 0
    except CardsmithError as e:
        print(e.message, file=sys.stderr)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
