# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Verbosity settings for the custom resource response reporter"""

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

DEFAULT_SERVICE_NAME = "cfn-reporter"


class Verbosity(IntEnum):
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def parse(cls, value: Union["Verbosity", int, str]) -> "Verbosity":
        """Accepts a Verbosity, its integer value, or its name in any case"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown verbosity {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Unknown verbosity {value!r}")


LOG_NORMAL = Verbosity.NORMAL
LOG_VERBOSE = Verbosity.VERBOSE
LOG_DEBUG = Verbosity.DEBUG


@dataclass(frozen=True)
class ReporterConfig:
    verbosity: Verbosity = Verbosity.NORMAL
    service_name: str = DEFAULT_SERVICE_NAME

    def __post_init__(self):
        object.__setattr__(self, "verbosity", Verbosity.parse(self.verbosity))

    @classmethod
    def from_env(cls) -> "ReporterConfig":
        return cls(
            verbosity=Verbosity.parse(os.getenv("REPORTER_VERBOSITY", "normal")),
            service_name=os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        )
