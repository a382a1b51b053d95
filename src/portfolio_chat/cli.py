"""Command line entry point: run the API, manage the database or open the chat."""

from __future__ import annotations

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    from portfolio_chat.settings import get_server_address

    host, port = get_server_address()
    uvicorn.run(
        "portfolio_chat.api.main:app",
        host=args.host or host,
        port=args.port or port,
        reload=args.reload,
    )
    return 0


def _init_db(args: argparse.Namespace) -> int:
    from portfolio_chat.data.db import get_database_url, init_db

    init_db()
    print(f"Database ready at {get_database_url()}")
    return 0


def _seed(args: argparse.Namespace) -> int:
    from portfolio_chat.data.db import init_db
    from portfolio_chat.services import seed_sample_data

    init_db()
    counts = seed_sample_data()
    for table, count in counts.items():
        print(f"- {table}: {count}")
    return 0


def _chat(args: argparse.Namespace) -> int:
    from portfolio_chat.chat.clients import ChatWebhookClient, PortfolioApiClient
    from portfolio_chat.tui import PortfolioChatApp

    app = PortfolioChatApp(
        api_client=PortfolioApiClient(args.api_url),
        webhook=ChatWebhookClient(args.webhook_url),
    )
    app.run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-chat", description="Portfolio chat API and terminal client."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the portfolio API server.")
    serve.add_argument("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
    serve.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 8000).")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes.")
    serve.set_defaults(handler=_serve)

    init = commands.add_parser("init-db", help="Create the content tables.")
    init.set_defaults(handler=_init_db)

    seed = commands.add_parser("seed", help="Load the sample portfolio content.")
    seed.set_defaults(handler=_seed)

    chat = commands.add_parser("chat", help="Open the terminal chat.")
    chat.add_argument("--api-url", default=None, help="Portfolio API base URL.")
    chat.add_argument("--webhook-url", default=None, help="Chat webhook URL.")
    chat.set_defaults(handler=_chat)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")
        return 130
    except SQLAlchemyError as exc:
        logger.exception("Database error")
        print(f"Database error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
