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

"""Read-only query facade over the Amazon MSK management API.

Each query maps to exactly one SDK call:

- get_cluster_info: aws kafka describe-cluster
- get_configuration_name, get_latest_configuration_revision: aws kafka describe-configuration
- get_server_properties: aws kafka describe-configuration-revision
- get_broker_connection_string(_tls): aws kafka get-bootstrap-brokers
"""

from awslabs.msk_metadata.consts import KAFKA_SERVICE_NAME, MAX_ATTEMPTS, USER_AGENT_EXTRA
from awslabs.msk_metadata.errors import AuthError, MskValidationError, RemoteAPIError
from awslabs.msk_metadata.models import BrokerEndpointSet, LatestRevision
from awslabs.msk_metadata.session import SessionProvider, new_authenticated_session
from awslabs.msk_metadata.testing import MustMskMetadataClient, TestingT
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger
from typing import Any, Dict, Optional


class MskMetadataClient:
    """Queries metadata about MSK clusters and configurations in one region."""

    def __init__(
        self,
        region: str,
        session_provider: Optional[SessionProvider] = None,
        client: Any = None,
    ):
        """Create a client for the given region.

        Args:
            region: AWS region name
            session_provider: Callable returning an authenticated boto3 session for a
                region. Defaults to new_authenticated_session.
            client: Kafka SDK client to use instead of building one from a session

        Raises:
            AuthError: If the region is empty or the session provider fails
        """
        if not region:
            raise AuthError('A region is required to create an MSK client')
        self.region = region

        if client is None:
            provider = session_provider or new_authenticated_session
            session = provider(region)
            client = session.client(
                KAFKA_SERVICE_NAME,
                config=Config(
                    user_agent_extra=USER_AGENT_EXTRA,
                    retries={'total_max_attempts': MAX_ATTEMPTS, 'mode': 'standard'},
                ),
            )
            logger.debug(f'Created kafka client for region: {region}')
        self._client = client

    def must(self, t: TestingT) -> MustMskMetadataClient:
        """Return a view of this client that fails the test t on any error."""
        return MustMskMetadataClient(self, t)

    def get_cluster_info(self, cluster_arn: str) -> Optional[Dict[str, Any]]:
        """Returns the ClusterInfo record of an MSK cluster.

        Args:
            cluster_arn: The ARN of the cluster

        Returns:
            dict: Cluster metadata as returned by DescribeCluster
        """
        _require('cluster_arn', cluster_arn)
        response = self._call('describe_cluster', ClusterArn=cluster_arn)
        return response.get('ClusterInfo')

    def get_configuration_name(self, arn: str) -> Optional[str]:
        """Returns the name of an MSK configuration."""
        _require('arn', arn)
        response = self._call('describe_configuration', Arn=arn)
        return response.get('Name')

    def get_latest_configuration_revision(self, arn: str) -> Optional[int]:
        """Returns the latest revision number of an MSK configuration.

        The number is read from the LatestRevision record of the response.
        """
        _require('arn', arn)
        response = self._call('describe_configuration', Arn=arn)
        return response.get('LatestRevision', {}).get('Revision')

    def get_latest_configuration_revision_info(self, arn: str) -> Optional[LatestRevision]:
        """Returns the full LatestRevision record of an MSK configuration.

        None when the response carries no LatestRevision with a revision number.
        """
        _require('arn', arn)
        response = self._call('describe_configuration', Arn=arn)
        return LatestRevision.from_response(response.get('LatestRevision'))

    def get_server_properties(self, arn: str, revision: int) -> Optional[bytes]:
        """Returns the broker server properties of a configuration revision.

        Args:
            arn: The ARN of the configuration
            revision: The revision number of the configuration

        Returns:
            bytes: Contents of server.properties for that revision
        """
        _require('arn', arn)
        if revision is None:
            raise MskValidationError('revision must be provided')
        response = self._call('describe_configuration_revision', Arn=arn, Revision=revision)
        properties = response.get('ServerProperties')
        if isinstance(properties, str):
            return properties.encode('utf-8')
        return properties

    def get_broker_connection_string(self, cluster_arn: str) -> Optional[str]:
        """Returns the plaintext bootstrap broker connection string of a cluster."""
        return self.get_broker_endpoints(cluster_arn).plaintext

    def get_broker_connection_string_tls(self, cluster_arn: str) -> Optional[str]:
        """Returns the TLS bootstrap broker connection string of a cluster."""
        return self.get_broker_endpoints(cluster_arn).tls

    def get_broker_endpoints(self, cluster_arn: str) -> BrokerEndpointSet:
        """Returns both bootstrap broker connection strings from one GetBootstrapBrokers call."""
        _require('cluster_arn', cluster_arn)
        response = self._call('get_bootstrap_brokers', ClusterArn=cluster_arn)
        return BrokerEndpointSet.from_response(response)

    def _call(self, operation: str, **params: Any) -> Dict[str, Any]:
        logger.debug(f'Calling kafka.{operation} in {self.region} with {params}')
        try:
            return getattr(self._client, operation)(**params)
        except (ClientError, BotoCoreError) as e:
            logger.warning(f'kafka.{operation} failed in {self.region}: {e}')
            raise RemoteAPIError.from_boto_error(e, operation) from e


def _require(name: str, value: Optional[str]) -> None:
    if not value:
        raise MskValidationError(f'{name} must be a non-empty string')
