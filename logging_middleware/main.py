"""Send a single log event to the evaluation service.

Usage:
    python -m logging_middleware.main --stack backend --level info --package service "started"

Reads ACCESS_TOKEN (and optionally EVALUATION_SERVICE_URL) from the
environment or a .env file in the working directory.
"""

import argparse
import asyncio

from logging_middleware.logging.client import log_event


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Send a log event to the evaluation service",
    )
    parser.add_argument("--stack", required=True, help="backend or frontend")
    parser.add_argument("--level", required=True,
                        help="debug, info, warn, error or fatal")
    parser.add_argument("--package", required=True, dest="package_name",
                        help="Package name, must be allowed for the stack")
    parser.add_argument("message", help="Log message")
    args = parser.parse_args(argv)

    asyncio.run(log_event(args.stack, args.level, args.package_name, args.message))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
