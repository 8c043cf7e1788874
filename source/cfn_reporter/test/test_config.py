# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from cfn_reporter.config import (
    DEFAULT_SERVICE_NAME,
    LOG_DEBUG,
    LOG_NORMAL,
    LOG_VERBOSE,
    ReporterConfig,
    Verbosity,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("normal", LOG_NORMAL),
        ("VERBOSE", LOG_VERBOSE),
        (" Debug ", LOG_DEBUG),
        (2, LOG_VERBOSE),
        (Verbosity.DEBUG, LOG_DEBUG),
    ],
)
def test_parse(value, expected):
    assert Verbosity.parse(value) is expected


@pytest.mark.parametrize("value", ["chatty", 0, 4, None, True])
def test_parse_unknown(value):
    with pytest.raises(ValueError):
        Verbosity.parse(value)


def test_levels_are_ordered():
    assert LOG_NORMAL < LOG_VERBOSE < LOG_DEBUG


def test_defaults():
    config = ReporterConfig()
    assert config.verbosity == LOG_NORMAL
    assert config.service_name == DEFAULT_SERVICE_NAME


def test_verbosity_name_coerced():
    assert ReporterConfig(verbosity="verbose").verbosity is LOG_VERBOSE


def test_from_env(monkeypatch):
    monkeypatch.setenv("REPORTER_VERBOSITY", "debug")
    monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "my-provider")
    config = ReporterConfig.from_env()
    assert config.verbosity == LOG_DEBUG
    assert config.service_name == "my-provider"


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("REPORTER_VERBOSITY", raising=False)
    monkeypatch.delenv("POWERTOOLS_SERVICE_NAME", raising=False)
    assert ReporterConfig.from_env() == ReporterConfig()
