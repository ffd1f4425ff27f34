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
"""awslabs.msk-metadata"""

__version__ = '0.1.0'

from awslabs.msk_metadata.client import MskMetadataClient  # noqa: E402
from awslabs.msk_metadata.errors import (  # noqa: E402
    AuthError,
    MskMetadataError,
    MskValidationError,
    RemoteAPIError,
)
from awslabs.msk_metadata.models import BrokerEndpointSet, LatestRevision  # noqa: E402
from awslabs.msk_metadata.testing import must_succeed  # noqa: E402


__all__ = [
    'AuthError',
    'BrokerEndpointSet',
    'LatestRevision',
    'MskMetadataClient',
    'MskMetadataError',
    'MskValidationError',
    'RemoteAPIError',
    'must_succeed',
]
