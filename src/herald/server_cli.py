"""CLI entry point for the Herald webhook server."""

import argparse
import os

from herald.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="herald-server",
        description="Herald: authenticated application webhook receiver",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind host (default: HERALD_HOST or {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Bind port (default: HERALD_PORT or {settings.port})",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: colored console logs instead of JSON (same as HERALD_LOCAL=1)",
    )
    args = parser.parse_args(argv)

    if args.local:
        os.environ["HERALD_LOCAL"] = "1"

    import uvicorn

    uvicorn.run("herald.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
