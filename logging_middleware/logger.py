"""Per-module loggers bound to a fixed stack and package."""

from dataclasses import dataclass

from loguru import logger

from logging_middleware.logging.client import log_event


@dataclass(frozen=True)
class EvaluationLogger:
    """One coroutine per level; warn and above also echo locally."""

    stack: str
    package_name: str

    async def debug(self, message: str) -> None:
        await log_event(self.stack, "debug", self.package_name, message)

    async def info(self, message: str) -> None:
        await log_event(self.stack, "info", self.package_name, message)

    async def warn(self, message: str) -> None:
        logger.warning(f"[WARN] {message}")
        await log_event(self.stack, "warn", self.package_name, message)

    async def error(self, message: str) -> None:
        logger.error(f"[ERROR] {message}")
        await log_event(self.stack, "error", self.package_name, message)

    async def fatal(self, message: str) -> None:
        logger.critical(f"[FATAL] {message}")
        await log_event(self.stack, "fatal", self.package_name, message)


def create_logger(stack: str, package_name: str) -> EvaluationLogger:
    """Create a logger whose events are tagged with `stack` and `package_name`.

    Identity is not checked here; an invalid stack or package is reported
    by each call instead.
    """
    return EvaluationLogger(stack, package_name)
