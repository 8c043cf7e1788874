# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Optional

from aws_lambda_powertools import Logger
from cfn_reporter.config import ReporterConfig, Verbosity

LOG_LEVEL = "INFO"


class ReporterLogger:
    """Powertools logger whose chattier output is gated on the reporter verbosity

    Reporters sharing a service name share one underlying logger, so its level
    is never changed per reporter. Verbose and debug output are both gated here
    and emitted at INFO.
    """

    def __init__(self, config: Optional[ReporterConfig] = None):
        config = config or ReporterConfig()
        self.service_name = config.service_name
        self.verbosity = config.verbosity
        self.logger = Logger(service=self.service_name, level=LOG_LEVEL)

    def _emit(self, log_method, message: str, /, **kwargs: Any) -> None:
        if kwargs:
            log_method(message, extra=kwargs)
        else:
            log_method(message)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit(self.logger.info, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit(self.logger.error, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._emit(self.logger.exception, message, **kwargs)

    def verbose(self, message: str, **kwargs: Any) -> None:
        if self.verbosity >= Verbosity.VERBOSE:
            self.info(message, **kwargs)

    def trace(self, message: str, **kwargs: Any) -> None:
        if self.verbosity >= Verbosity.DEBUG:
            self.info(message, **kwargs)

    def failure(self, error: BaseException) -> None:
        """Full traceback at DEBUG, message only otherwise"""
        if self.verbosity >= Verbosity.DEBUG:
            self.logger.error(str(error), exc_info=error)
        else:
            self.error(str(error))

    @property
    def log(self) -> Logger:
        return self.logger


def get_logger(config: Optional[ReporterConfig] = None) -> ReporterLogger:
    return ReporterLogger(config)
