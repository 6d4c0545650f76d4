from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, TextIO

from gitrefs.logging.helpers import setup_base_logger, get_logger


class DefaultLoggerFactory:
    """Factory that configures the 'gitrefs' base logger on first use.

    Configuration is delegated to `setup_base_logger`; loggers handed out are
    always namespaced under 'gitrefs'.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        json_logs: Optional[bool] = None,
        level: Optional[int] = None,
        stream: Optional[TextIO] = None,
    ) -> 'DefaultLoggerFactory':
        """Read GITREFS_LOG_JSON=1 and GITREFS_LOG_LEVEL=<name>; explicit arguments win."""
        env = os.environ if env is None else env
        if json_logs is None:
            json_logs = env.get('GITREFS_LOG_JSON') == '1'
        if level is None:
            name = (env.get('GITREFS_LOG_LEVEL') or 'WARNING').upper()
            resolved = logging.getLevelName(name)
            level = resolved if isinstance(resolved, int) else logging.WARNING
        return cls(json_logs=json_logs, level=level, stream=stream)

    @property
    def level(self) -> int:
        return self._level

    @property
    def json_logs(self) -> bool:
        return self._json

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
