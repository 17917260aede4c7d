from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from seocheck.client.orchestrator import AnalysisOrchestrator
from seocheck.client.session import AnalysisSession
from seocheck.client.state import UIState
from seocheck.client.view import TerminalView
from seocheck.core.config import get_settings
from seocheck.core.logging import configure_logging

DEFAULT_SERVER = "http://localhost:3000"


def _add_analyze_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", default=None, help="Raw content to audit (at least 50 characters).")
    source.add_argument("--text-file", default=None, help="Read the content to audit from a file.")
    source.add_argument("--url", default=None, help="Absolute http(s) URL to audit.")
    parser.add_argument(
        "--server",
        default=os.environ.get("SEOCHECK_SERVER", DEFAULT_SERVER),
        help="Base URL of the analysis server.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument("--json", action="store_true", help="Print the raw report JSON instead of the rendered view.")


def _add_serve_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default=None, help="Defaults to HOST.")
    parser.add_argument("--port", type=int, default=None, help="Defaults to PORT.")
    parser.add_argument("--reload", action="store_true", help="Restart the server on code changes.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seocheck",
        description="Content SEO check: audit raw text or a URL against the analysis server.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Submit text or a URL and render the report.")
    _add_analyze_args(analyze)

    serve = sub.add_parser("serve", help="Run the analysis API server.")
    _add_serve_args(serve)
    return parser


def _read_inputs(args: argparse.Namespace) -> tuple[str, str | None, str | None]:
    if args.url is not None:
        return "url", None, args.url
    if args.text_file:
        return "text", Path(args.text_file).read_text(encoding="utf-8"), None
    return "text", args.text, None


async def _analyze(args: argparse.Namespace) -> int:
    mode, text, url = _read_inputs(args)
    orchestrator = AnalysisOrchestrator(args.server)

    view = TerminalView(out=sys.stderr if args.json else None, color=not (args.no_color or args.json))
    session = AnalysisSession(orchestrator, mode=mode, on_change=view)
    state = await session.analyze(text, url)
    if args.json and session.last_report is not None:
        print(json.dumps(session.last_report, ensure_ascii=True, indent=2))
    return _exit_code(state)


def _exit_code(state: UIState) -> int:
    if state.phase == "success":
        return 0
    return 2 if state.prompt else 1


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port
    uvicorn.run("seocheck.main:app", host=host, port=port, reload=args.reload)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "analyze":
        configure_logging("WARNING", json_logs=False)
        return asyncio.run(_analyze(args))

    if args.command == "serve":
        return _serve(args)

    raise RuntimeError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
