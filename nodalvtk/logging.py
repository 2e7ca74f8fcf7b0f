# SPDX-FileCopyrightText: 2023 Dennis Gläser <dennis.glaeser@iws.uni-stuttgart.de>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Loggers used to report on the progress of exports"""

import sys
from typing import TextIO, Protocol, List


class Logger(Protocol):
    """Interface for loggers"""
    @property
    def verbosity_level(self) -> int:
        ...

    @verbosity_level.setter
    def verbosity_level(self, level: int) -> None:
        ...

    def log(self, message: str, verbosity_level: int = 1) -> None:
        ...


class LoggerBase:
    """Filters messages by verbosity and forwards the remaining ones to _log()"""
    def __init__(self, verbosity_level: int = 100) -> None:
        self._verbosity_level = verbosity_level

    @property
    def verbosity_level(self) -> int:
        return self._verbosity_level

    @verbosity_level.setter
    def verbosity_level(self, level: int) -> None:
        self._verbosity_level = level

    def log(self, message: str, verbosity_level: int = 1) -> None:
        if verbosity_level <= self._verbosity_level:
            self._log(message)

    def _log(self, message: str) -> None:
        """Implementation-defined message logging"""


class LoggableBase:
    """Base class for classes that report to any number of attached loggers"""
    def __init__(self) -> None:
        self._loggers: List[Logger] = []

    def attach_logger(self, logger: Logger) -> None:
        if not any(_logger is logger for _logger in self._loggers):
            self._loggers.append(logger)

    def remove_logger(self, logger: Logger) -> None:
        self._loggers = [_logger for _logger in self._loggers if _logger is not logger]

    def _log(self, message: str, verbosity_level: int = 1) -> None:
        for _logger in self._loggers:
            _logger.log(message, verbosity_level)


class StreamLogger(LoggerBase):
    """Logging into output streams"""
    def __init__(self,
                 ostream: TextIO,
                 verbosity_level: int = 100) -> None:
        self._ostream = ostream
        super().__init__(verbosity_level)

    def _log(self, message: str) -> None:
        self._ostream.write(message)


class StandardOutputLogger(StreamLogger):
    """Logging to standard out"""
    def __init__(self, verbosity_level: int = 100) -> None:
        super().__init__(sys.stdout, verbosity_level)


class NullDeviceLogger(LoggerBase):
    """Logger that discards all messages"""
    def _log(self, message: str) -> None:
        pass
