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

"""Pydantic models for composite MSK metadata results."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class BrokerEndpointSet(BaseModel):
    """Bootstrap broker connection strings of a cluster."""

    plaintext: Optional[str] = Field(
        default=None, description='Plaintext bootstrap broker connection string'
    )
    tls: Optional[str] = Field(default=None, description='TLS bootstrap broker connection string')

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> 'BrokerEndpointSet':
        """Build from a GetBootstrapBrokers response."""
        return cls(
            plaintext=response.get('BootstrapBrokerString'),
            tls=response.get('BootstrapBrokerStringTls'),
        )


class LatestRevision(BaseModel):
    """Latest revision of an MSK configuration."""

    revision: int = Field(description='The revision number')
    creation_time: Optional[datetime] = Field(
        default=None, description='The time the revision was created'
    )
    description: Optional[str] = Field(default=None, description='The revision description')

    @classmethod
    def from_response(
        cls, latest_revision: Optional[Dict[str, Any]]
    ) -> Optional['LatestRevision']:
        """Build from the LatestRevision field of a DescribeConfiguration response."""
        if not latest_revision or latest_revision.get('Revision') is None:
            return None
        return cls(
            revision=latest_revision['Revision'],
            creation_time=latest_revision.get('CreationTime'),
            description=latest_revision.get('Description'),
        )
