# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from unittest.mock import MagicMock

import pytest
from cfn_reporter import cfnresponse
from cfn_reporter.config import LOG_NORMAL

RESPONSE_URL = "https://cloudformation-custom-resource-response.s3.amazonaws.com/resp/testing?testId=436"


class Context:
    def __init__(self, log_stream_name):
        self.log_stream_name = log_stream_name


@pytest.fixture()
def http_mock(mocker):
    mock = mocker.patch("cfn_reporter.cfnresponse.http")
    response = MagicMock()
    response.status = 200
    response.headers = {"x-amz-request-id": "f00d"}
    response.data = b"ok"
    mock.request.return_value = response
    yield mock


@pytest.fixture()
def event():
    yield {
        "StackId": "f3a936",
        "RequestId": "c4dd7439",
        "LogicalResourceId": "testResource",
        "ResponseURL": RESPONSE_URL,
    }


@pytest.fixture()
def context():
    yield Context("fake-logs-1df372")


@pytest.fixture(autouse=True)
def reset_default_verbosity():
    yield
    cfnresponse.configure(verbosity=LOG_NORMAL)
