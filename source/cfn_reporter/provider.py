# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Custom resource provider that dispatches on request type and reports the outcome"""

import json
from typing import Any, Callable, Optional, Tuple

from cfn_reporter import cfnresponse

ResourceHandler = Callable[[dict, Any], Tuple[Optional[str], Any]]


class InvalidRequest(Exception):
    """Invalid custom resource request"""


class CustomResourceProvider:
    def __init__(
        self,
        on_create: Optional[ResourceHandler] = None,
        on_update: Optional[ResourceHandler] = None,
        on_delete: Optional[ResourceHandler] = None,
        reporter: Optional[cfnresponse.ResponseReporter] = None,
    ):
        self.handlers = {
            cfnresponse.CREATE: on_create,
            cfnresponse.UPDATE: on_update,
            cfnresponse.DELETE: on_delete,
        }
        self._reporter = reporter

    @property
    def reporter(self) -> cfnresponse.ResponseReporter:
        return self._reporter or cfnresponse.get_default_reporter()

    def lambda_handler(self, event, context):
        """Handle the Lambda request for a custom resource"""
        logger = self.reporter.logger
        logger.trace(f"received event: {json.dumps(event, default=str)}")

        try:
            request_type = event["RequestType"]
            if request_type not in self.handlers:
                raise InvalidRequest(f"Invalid request type {request_type}")

            handler = self.handlers[request_type]
            if handler is None:
                logger.info(f"{request_type}, nothing to do")
                physical_resource_id, data = None, None
            else:
                logger.info(request_type)
                physical_resource_id, data = handler(event, context)
        except Exception as exc:
            logger.exception(str(exc))
            self.reporter.send_failure(exc, event, context=context)
            return

        self.reporter.send_success(
            physical_resource_id
            or event.get("PhysicalResourceId")
            or cfnresponse.DEFAULT_PHYSICAL_RESOURCE_ID,
            data,
            event,
        )
