"""Allow-lists for log events accepted by the evaluation service.

An event is only sent when its stack, level and package all appear here.
Packages are scoped per stack: `handler` is a backend package, `hook` a
frontend one, and a few (`auth`, `config`, `middleware`) exist in both.
"""

from types import MappingProxyType

from loguru import logger

ALLOWED_STACKS = ("backend", "frontend")
ALLOWED_LEVELS = ("debug", "info", "warn", "error", "fatal")
ALLOWED_PACKAGES = MappingProxyType({
    "backend": (
        "cache", "controller", "cron_job", "db", "domain", "handler",
        "repository", "route", "service", "auth", "config", "middleware",
    ),
    "frontend": (
        "api", "component", "hook", "page", "style",
        "auth", "config", "middleware",
    ),
})


def validate(stack: str, level: str, package_name: str) -> bool:
    """Check an event's identity fields. Logs the first failure found."""
    if stack not in ALLOWED_STACKS:
        logger.error(f"Invalid stack: {stack}. Allowed: {', '.join(ALLOWED_STACKS)}")
        return False

    if level not in ALLOWED_LEVELS:
        logger.error(f"Invalid level: {level}. Allowed: {', '.join(ALLOWED_LEVELS)}")
        return False

    packages = ALLOWED_PACKAGES[stack]
    if package_name not in packages:
        logger.error(f"Invalid package: {package_name} for stack: {stack}. "
                     f"Allowed: {', '.join(packages)}")
        return False

    return True
