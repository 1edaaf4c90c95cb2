"""ConsoleLog: prefixed four-level message sink on top of ``logging``.

Messages are built the way a console print would show them: every value is
passed through ``str()`` and the pieces are joined with single spaces.
"""

from __future__ import annotations

import logging
import time
from typing import Any

__all__ = ["ConsoleLog"]


def _join(values: tuple[Any, ...]) -> str:
    return " ".join(str(v) for v in values)


class ConsoleLog:
    """Prefixed log/warn/error/debug helpers.

    Args:
        prefix: Tag placed in front of info, warning and error messages.
        logger: Target logger.  Defaults to the ``object_inspector.console``
            logger.

    Example::

        console = ConsoleLog("[SkillPrediction]")
        console.warn("unknown skill", 1100)
        # WARNING  [SkillPrediction] WARNING! unknown skill 1100
    """

    def __init__(
        self,
        prefix: str = "[object-inspector]",
        logger: logging.Logger | None = None,
    ) -> None:
        self.prefix = prefix
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def log(self, *values: Any) -> None:
        self._logger.info("%s %s", self.prefix, _join(values))

    def warn(self, *values: Any) -> None:
        self._logger.warning("%s WARNING! %s", self.prefix, _join(values))

    def error(self, *values: Any) -> None:
        self._logger.error("%s ERROR! %s", self.prefix, _join(values))

    def debug(self, *values: Any) -> None:
        """Log at DEBUG, stamped with the last four digits of the epoch milliseconds."""
        stamp = time.time_ns() // 1_000_000 % 10000
        self._logger.debug("[%04d] %s", stamp, _join(values))
