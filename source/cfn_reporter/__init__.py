# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from cfn_reporter.cfnresponse import (
    CREATE,
    DEFAULT_PHYSICAL_RESOURCE_ID,
    DEFAULT_REASON,
    DEFAULT_REASON_WITH_CONTEXT,
    DELETE,
    FAILED,
    SUCCESS,
    UPDATE,
    ApplicationFailure,
    CriticalResponseError,
    MalformedDestination,
    MissingContext,
    MissingDetails,
    ResponseError,
    ResponseReporter,
    StatusDetails,
    TransportError,
    configure,
    report,
    send_failure,
    send_success,
)
from cfn_reporter.config import (
    LOG_DEBUG,
    LOG_NORMAL,
    LOG_VERBOSE,
    ReporterConfig,
    Verbosity,
)
from cfn_reporter.provider import CustomResourceProvider, InvalidRequest

__all__ = [
    "CREATE",
    "UPDATE",
    "DELETE",
    "SUCCESS",
    "FAILED",
    "DEFAULT_PHYSICAL_RESOURCE_ID",
    "DEFAULT_REASON",
    "DEFAULT_REASON_WITH_CONTEXT",
    "LOG_NORMAL",
    "LOG_VERBOSE",
    "LOG_DEBUG",
    "ApplicationFailure",
    "CriticalResponseError",
    "CustomResourceProvider",
    "InvalidRequest",
    "MalformedDestination",
    "MissingContext",
    "MissingDetails",
    "ReporterConfig",
    "ResponseError",
    "ResponseReporter",
    "StatusDetails",
    "TransportError",
    "Verbosity",
    "configure",
    "report",
    "send_failure",
    "send_success",
]
