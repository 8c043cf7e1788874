# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Send custom resource status to CloudFormation

The status document is PUT to the pre-signed ResponseURL carried by the
custom resource event. Every entry point accepts an optional error-first
callback. With a callback, the outcome is always handed to it as
``callback(error, result)`` and its return value is returned. Without one,
success returns the result, a FAILED status returns the ApplicationFailure,
and critical errors (bad input, bad URL, transport failure) are raised.
"""

import json
import traceback
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional, Union

import urllib3
from cfn_reporter.config import ReporterConfig, Verbosity
from cfn_reporter.logger import ReporterLogger, get_logger
from urllib3.exceptions import HTTPError, LocationParseError
from urllib3.util import Url, parse_url

CREATE = "Create"
UPDATE = "Update"
DELETE = "Delete"
SUCCESS = "SUCCESS"
FAILED = "FAILED"
DEFAULT_PHYSICAL_RESOURCE_ID = "NOIDPROVIDED"
DEFAULT_REASON_WITH_CONTEXT = "Details in CloudWatch Log Stream: "
DEFAULT_REASON = "WARNING: Reason not properly provided for failure"
MAX_REASON_LENGTH = 3854  # response can't exceed 4 kiB

http = urllib3.PoolManager()

Callback = Callable[[Optional[BaseException], Any], Any]


class ResponseError(Exception):
    """Any error delivered by the reporter"""


class CriticalResponseError(ResponseError):
    """The status document could not be delivered"""


class MissingContext(CriticalResponseError):
    def __init__(self):
        super().__init__("CRITICAL: no event, cannot send response")


class MissingDetails(CriticalResponseError):
    def __init__(self, problem: str = "no response details"):
        super().__init__(f"CRITICAL: {problem}, cannot send response")


class MalformedDestination(CriticalResponseError):
    def __init__(self, detail: Any):
        super().__init__(f"CRITICAL: Error parsing URL due to: [{detail}]")


class TransportError(CriticalResponseError):
    def __init__(self, cause: BaseException):
        super().__init__(f"CRITICAL: Error sending response due to: [{cause}]")
        self.cause = cause


class ApplicationFailure(ResponseError):
    """The status document was delivered and reported FAILED"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass
class StatusDetails:
    status: str
    reason: Any = None
    physical_resource_id: Optional[str] = None
    data: Any = None
    no_echo: bool = False

    @classmethod
    def from_dict(cls, details: Mapping[str, Any]) -> "StatusDetails":
        return cls(
            status=details.get("Status"),
            reason=details.get("Reason"),
            physical_resource_id=details.get("PhysicalResourceId"),
            data=details.get("Data"),
            no_echo=bool(details.get("NoEcho", False)),
        )


def stringify_reason(reason: Any) -> str:
    """CloudFormation requires Reason to be a string

    Exceptions become their formatted traceback, anything else its JSON text.
    """
    if isinstance(reason, str):
        return reason
    if isinstance(reason, BaseException):
        return "".join(
            traceback.format_exception(type(reason), reason, reason.__traceback__)
        ).rstrip()
    return json.dumps(reason, default=str)


def normalize_details(details: StatusDetails) -> StatusDetails:
    data = details.data
    if data and not isinstance(data, Mapping):
        data = {"data": data}
    elif data:
        data = dict(data)

    reason = details.reason
    # empty containers still serialize, e.g. {} -> "{}"
    if isinstance(reason, (Mapping, list, tuple)) or (
        reason and not isinstance(reason, str)
    ):
        reason = stringify_reason(reason)
    if reason and len(reason) > MAX_REASON_LENGTH:
        reason = reason[:MAX_REASON_LENGTH]

    return replace(details, reason=reason, data=data)


def build_document(details: StatusDetails, event: Mapping[str, Any]) -> dict:
    document: dict[str, Any] = {"Status": details.status}
    if details.reason:
        document["Reason"] = details.reason
    document["PhysicalResourceId"] = details.physical_resource_id
    document["StackId"] = event.get("StackId")
    document["RequestId"] = event.get("RequestId")
    document["LogicalResourceId"] = event.get("LogicalResourceId")
    if details.no_echo:
        document["NoEcho"] = True
    if details.data:
        document["Data"] = details.data
    return document


def parse_destination(response_url: Any) -> Url:
    if not isinstance(response_url, str):
        raise MalformedDestination(f"Invalid URL: {response_url!r}")
    try:
        url = parse_url(response_url)
    except LocationParseError as err:
        raise MalformedDestination(err) from err
    if not url.scheme or not url.host:
        raise MalformedDestination(f"Invalid URL: {response_url}")
    return url


class ResponseReporter:
    def __init__(
        self,
        config: Optional[ReporterConfig] = None,
        pool: Optional[urllib3.PoolManager] = None,
    ):
        self.config = config or ReporterConfig()
        self.logger: ReporterLogger = get_logger(self.config)
        self._pool = pool

    @property
    def pool(self) -> urllib3.PoolManager:
        return self._pool or http

    def configure(self, **options: Any) -> None:
        """Replace config fields, e.g. ``configure(verbosity=LOG_DEBUG)``"""
        self.config = replace(self.config, **options)
        self.logger = get_logger(self.config)

    def report(
        self,
        details: Union[StatusDetails, Mapping[str, Any], None],
        event: Optional[Mapping[str, Any]],
        callback: Optional[Callback] = None,
    ) -> Any:
        """Send the status document and deliver the outcome

        Args:
            details: status, reason, physical resource id and data to report
            event: custom resource event holding the ResponseURL and ids
            callback: optional error-first callback

        Returns:
            The callback's return value if a callback was given. Otherwise
            the (normalized) Data or None on SUCCESS, and the
            ApplicationFailure on FAILED.

        Raises:
            CriticalResponseError: only when no callback was given
        """
        self.logger.verbose("Response details", details=details, event=event)

        try:
            outcome = self._deliver(details, event)
        except CriticalResponseError as error:
            self.logger.failure(error)
            if callback is None:
                raise
            return callback(error, None)

        if isinstance(outcome, ApplicationFailure):
            self.logger.failure(outcome)
            if callback is None:
                return outcome
            return callback(outcome, None)

        if callback is None:
            return outcome
        return callback(None, outcome)

    def send_success(
        self,
        physical_resource_id: Optional[str],
        data: Any,
        event: Optional[Mapping[str, Any]],
        callback: Optional[Callback] = None,
    ) -> Any:
        return self.report(
            StatusDetails(
                status=SUCCESS,
                reason="",
                physical_resource_id=physical_resource_id,
                data=data,
            ),
            event,
            callback,
        )

    def send_failure(
        self,
        reason: Any,
        event: Optional[Mapping[str, Any]],
        callback: Optional[Callback] = None,
        context: Any = None,
        physical_resource_id: Optional[str] = None,
    ) -> Any:
        """Send a FAILED status, filling in a default reason and physical id

        Without a reason, the Lambda context's log stream is referenced, or a
        generic warning is used when there is no context. Without a physical
        id, the one from the event is echoed, falling back to
        DEFAULT_PHYSICAL_RESOURCE_ID.
        """
        if reason:
            final_reason = reason
        elif context is not None:
            final_reason = f"{DEFAULT_REASON_WITH_CONTEXT}{context.log_stream_name}"
        else:
            final_reason = DEFAULT_REASON

        final_physical_resource_id = (
            physical_resource_id
            or (event or {}).get("PhysicalResourceId")
            or DEFAULT_PHYSICAL_RESOURCE_ID
        )
        self.logger.trace(final_physical_resource_id)

        return self.report(
            StatusDetails(
                status=FAILED,
                reason=final_reason,
                physical_resource_id=final_physical_resource_id,
            ),
            event,
            callback,
        )

    def _deliver(self, details, event) -> Any:
        if not event:
            raise MissingContext()
        if not details:
            raise MissingDetails()
        if isinstance(details, Mapping):
            details = StatusDetails.from_dict(details)
        if details.status not in (SUCCESS, FAILED):
            raise MissingDetails(f"invalid Status {details.status!r}")

        url = parse_destination(event.get("ResponseURL"))
        try:
            details = normalize_details(details)
            body = json.dumps(
                build_document(details, event), default=str, ensure_ascii=False
            )
        except (TypeError, ValueError) as err:
            raise MissingDetails(f"unserializable response details [{err}]") from err

        self._put(url, body)

        if details.status == FAILED:
            return ApplicationFailure(details.reason or "")
        return details.data or None

    def _put(self, url: Url, body: str) -> None:
        payload = body.encode("utf-8")
        headers = {"content-type": "", "content-length": str(len(payload))}
        read_body = self.config.verbosity >= Verbosity.VERBOSE

        self.logger.verbose(
            "Request options", http_method="PUT", url=url.url, headers=headers
        )
        self.logger.verbose(body)

        try:
            response = self.pool.request(
                "PUT",
                url.url,
                body=payload,
                headers=headers,
                retries=False,
                preload_content=read_body,
            )
        except HTTPError as err:
            raise TransportError(err) from err

        self.logger.info("Response sent.")

        if read_body:
            self.logger.verbose(f"STATUS: {response.status}")
            self.logger.verbose(f"HEADERS: {json.dumps(dict(response.headers))}")
            self.logger.verbose(
                f"RESPONSE BODY: {response.data.decode('utf-8', errors='replace')}"
            )
        else:
            response.release_conn()


_default_reporter = ResponseReporter(ReporterConfig.from_env())


def get_default_reporter() -> ResponseReporter:
    return _default_reporter


def configure(**options: Any) -> None:
    _default_reporter.configure(**options)


def report(details, event, callback: Optional[Callback] = None) -> Any:
    return _default_reporter.report(details, event, callback)


def send_success(
    physical_resource_id, data, event, callback: Optional[Callback] = None
) -> Any:
    return _default_reporter.send_success(physical_resource_id, data, event, callback)


def send_failure(
    reason,
    event,
    callback: Optional[Callback] = None,
    context=None,
    physical_resource_id: Optional[str] = None,
) -> Any:
    return _default_reporter.send_failure(
        reason, event, callback, context, physical_resource_id
    )
