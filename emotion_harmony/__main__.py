from __future__ import annotations

import argparse
import json
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from .constants import APP_NAME, CLI_EXIT_INPUT_ERROR, DEFAULT_JSON_INDENT, SERVICE_ALTERNATIVE_COUNT
from .logger_config import logger
from .models import EmotionAnalysis
from .service import build_emotion_chord_response


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emotion_harmony", description=APP_NAME)
    parser.add_argument("input", help="EmotionAnalysis JSON file, or - for stdin")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    parser.add_argument(
        "--alternatives",
        type=int,
        default=SERVICE_ALTERNATIVE_COUNT,
        help="Number of alternative chords to attempt",
    )
    parser.add_argument("--progression", action="store_true", help="Include a chord progression")
    parser.add_argument("--cultural", action="store_true", help="Include raga and maqam suggestions")
    parser.add_argument("--indent", type=int, default=DEFAULT_JSON_INDENT, help="JSON indentation")
    return parser


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def load_emotion(path: str) -> EmotionAnalysis:
    return EmotionAnalysis.model_validate(json.loads(read_input(path)))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        emotion = load_emotion(args.input)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.error("Invalid emotion input %s: %s", args.input, exc)
        print(f"error: cannot read emotion from {args.input}: {exc}", file=sys.stderr)
        return CLI_EXIT_INPUT_ERROR

    rng = random.Random(args.seed)
    response = build_emotion_chord_response(
        emotion,
        include_progression=args.progression,
        include_cultural_alternatives=args.cultural,
        rng=rng,
        alternative_count=args.alternatives,
    )
    print(response.model_dump_json(by_alias=True, indent=args.indent, exclude_none=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
