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

"""Region-scoped helper functions.

Each ``*_e`` function creates a client for the region and performs one query,
raising on failure. The function of the same name without the suffix takes a
test context first and fails the test instead.
"""

from awslabs.msk_metadata.client import MskMetadataClient
from awslabs.msk_metadata.testing import TestingT, must_succeed
from typing import Any, Dict, Optional


def new_msk_client_e(region: str) -> MskMetadataClient:
    """Creates an MSK metadata client."""
    return MskMetadataClient(region)


def new_msk_client(t: TestingT, region: str) -> MskMetadataClient:
    """Creates an MSK metadata client."""
    return must_succeed(t, new_msk_client_e, region)


def get_msk_cluster_e(region: str, arn: str) -> Optional[Dict[str, Any]]:
    """Fetches information about the specified MSK cluster."""
    return new_msk_client_e(region).get_cluster_info(arn)


def get_msk_cluster(t: TestingT, region: str, arn: str) -> Optional[Dict[str, Any]]:
    """Fetches information about the specified MSK cluster."""
    return must_succeed(t, get_msk_cluster_e, region, arn)


def get_msk_config_name_e(region: str, arn: str) -> Optional[str]:
    """Fetches the name of the specified MSK configuration."""
    return new_msk_client_e(region).get_configuration_name(arn)


def get_msk_config_name(t: TestingT, region: str, arn: str) -> Optional[str]:
    """Fetches the name of the specified MSK configuration."""
    return must_succeed(t, get_msk_config_name_e, region, arn)


def get_msk_config_latest_revision_e(region: str, arn: str) -> Optional[int]:
    """Fetches the latest revision number of an MSK configuration."""
    return new_msk_client_e(region).get_latest_configuration_revision(arn)


def get_msk_config_latest_revision(t: TestingT, region: str, arn: str) -> Optional[int]:
    """Fetches the latest revision number of an MSK configuration."""
    return must_succeed(t, get_msk_config_latest_revision_e, region, arn)


def get_msk_server_properties_e(region: str, arn: str, revision: int) -> Optional[bytes]:
    """Fetches the server properties of MSK brokers for a configuration revision."""
    return new_msk_client_e(region).get_server_properties(arn, revision)


def get_msk_server_properties(
    t: TestingT, region: str, arn: str, revision: int
) -> Optional[bytes]:
    """Fetches the server properties of MSK brokers for a configuration revision."""
    return must_succeed(t, get_msk_server_properties_e, region, arn, revision)


def get_msk_broker_string_e(region: str, arn: str) -> Optional[str]:
    """Fetches the bootstrap brokers connection string of an MSK cluster."""
    return new_msk_client_e(region).get_broker_connection_string(arn)


def get_msk_broker_string(t: TestingT, region: str, arn: str) -> Optional[str]:
    """Fetches the bootstrap brokers connection string of an MSK cluster."""
    return must_succeed(t, get_msk_broker_string_e, region, arn)


def get_msk_broker_string_tls_e(region: str, arn: str) -> Optional[str]:
    """Fetches the bootstrap brokers TLS connection string of an MSK cluster."""
    return new_msk_client_e(region).get_broker_connection_string_tls(arn)


def get_msk_broker_string_tls(t: TestingT, region: str, arn: str) -> Optional[str]:
    """Fetches the bootstrap brokers TLS connection string of an MSK cluster."""
    return must_succeed(t, get_msk_broker_string_tls_e, region, arn)
