import argparse

import uvicorn

from greenlight.core.settings import Settings
from greenlight.main import create_app


def parse_args(argv: list[str] | None = None, defaults: Settings | None = None) -> Settings:
    """Build settings from the environment, then let command line flags override them."""
    base = defaults or Settings()
    parser = argparse.ArgumentParser(description="Greenlight movie API server")
    parser.add_argument("--port", type=int, default=base.port, help="API server port")
    parser.add_argument(
        "--env",
        default=base.environment,
        choices=["development", "staging", "production"],
        help="Environment (development|staging|production)",
    )
    parser.add_argument("--db-dsn", default=base.db_dsn, help="PostgreSQL DSN")
    parser.add_argument("--log-level", default=base.log_level, help="Root log level")
    args = parser.parse_args(argv)

    return base.model_copy(
        update={
            "port": args.port,
            "environment": args.env,
            "db_dsn": args.db_dsn,
            "log_level": args.log_level,
        }
    )


def main(argv: list[str] | None = None) -> None:
    settings = parse_args(argv)
    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    main()
