"""Process entry point: ``python -m metasearch``."""

import argparse

import uvicorn

from metasearch.api.app import create_app
from metasearch.config.settings import get_settings
from metasearch.core.logging import get_logger, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="metasearch HTTP server")
    parser.add_argument("--host", default=None, help="Server host (default: from settings)")
    parser.add_argument("--port", type=int, default=None, help="Server port (default: from settings)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from settings)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    overrides = {
        key: value
        for key, value in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if value is not None
    }
    settings = get_settings().model_copy(update=overrides)

    setup_logging(settings)
    app = create_app(settings)

    get_logger("metasearch").info("server_starting", host=settings.host, port=settings.port)
    # log_config=None keeps uvicorn on the structlog handlers set up above
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
