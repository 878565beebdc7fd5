from __future__ import annotations

import argparse

import uvicorn

from diagnostic.infrastructure.config import get_settings

APP_PATH = "diagnostic.web.main:app"


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the diagnostic scoring API")
    parser.add_argument("--host", default=settings.app.host)
    parser.add_argument("--port", type=int, default=settings.app.port)
    parser.add_argument(
        "--reload",
        action=argparse.BooleanOptionalAction,
        default=settings.is_development(),
        help="Reload on code changes (default: on in development)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
