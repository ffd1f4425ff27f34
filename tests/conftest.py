# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shared fixtures for the MSK metadata tests."""

import pytest
from awslabs.msk_metadata.client import MskMetadataClient
from botocore.exceptions import ClientError
from unittest.mock import Mock


def _make_client_error(
    code: str = 'NotFoundException',
    message: str = 'The requested resource was not found',
    operation_name: str = 'DescribeCluster',
    status_code: int = 404,
) -> ClientError:
    """Build a botocore ClientError as the kafka client would raise it."""
    return ClientError(
        {
            'Error': {'Code': code, 'Message': message},
            'ResponseMetadata': {'HTTPStatusCode': status_code, 'RequestId': 'test-request-id'},
        },
        operation_name,
    )


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors as the kafka client raises them."""
    return _make_client_error


@pytest.fixture
def mock_kafka_client():
    """Mock boto3 kafka client."""
    return Mock()


@pytest.fixture
def client(mock_kafka_client):
    """MskMetadataClient backed by the mock kafka client."""
    return MskMetadataClient('us-west-2', client=mock_kafka_client)
