from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from summify.config import load_settings
from summify.errors import SummifyError
from summify.extraction import extract_text
from summify.summarizer import LengthPreference, extract_summary


logger = logging.getLogger("summify.cli")


def _read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.path and args.path != "-":
        path = Path(args.path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return extract_text(path.read_bytes(), filename=path.name)
    return sys.stdin.read()


def _cmd_summarize(args: argparse.Namespace) -> int:
    logging.basicConfig(level=logging.WARNING)
    text = _read_input(args)
    res = extract_summary(text, args.length)
    if args.json:
        print(
            json.dumps(
                {
                    "summary": res.summary,
                    "length": res.length.value,
                    "sentence_count": res.sentence_count,
                    "selected_count": res.selected_count,
                    "selected_indices": [s.index for s in res.selected],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        print(res.summary)
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from summify.api import create_app

    settings = load_settings(args.config or os.environ.get("SUMMIFY_CONFIG"))
    app = create_app(settings)
    uvicorn.run(app, host=args.host or settings.api.host, port=args.port or settings.api.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="summify", description="Extractive document summarizer")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sum = sub.add_parser("summarize", help="Summarize a document, --text, or stdin")
    p_sum.add_argument("path", nargs="?", default=None, help="PDF/TXT/DOC/DOCX file ('-' or omitted reads stdin)")
    p_sum.add_argument("--text", type=str, default=None, help="Summarize this text instead of a file")
    p_sum.add_argument(
        "--length",
        type=str,
        default=LengthPreference.MEDIUM.value,
        help="short, medium or long (anything else means medium)",
    )
    p_sum.add_argument("--json", action="store_true", help="Print a JSON object instead of plain text")
    p_sum.set_defaults(func=_cmd_summarize)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--config", type=str, default=None, help="Path to config.yaml")
    p_serve.add_argument("--host", type=str, default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        return args.func(args)
    except (SummifyError, FileNotFoundError) as e:
        print(f"summify: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
