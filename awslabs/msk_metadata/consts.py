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

"""Constants for the MSK metadata helpers."""

from awslabs.msk_metadata import __version__


DEFAULT_AWS_REGION = 'us-east-1'
LOG_LEVEL_INI = 'msk_metadata_log_level'

KAFKA_SERVICE_NAME = 'kafka'
USER_AGENT_EXTRA = f'awslabs/msk-metadata/{__version__}'

# One attempt per query, retries are left to the caller
MAX_ATTEMPTS = 1

ASSUME_ROLE_SESSION_NAME = 'msk-metadata'

# Environment variable names
ENV_VARS = {
    'AWS_REGION': 'AWS_REGION',
    'AWS_DEFAULT_REGION': 'AWS_DEFAULT_REGION',
    'AWS_PROFILE': 'AWS_PROFILE',
    'IAM_ROLE': 'MSK_METADATA_IAM_ROLE',
    'LOG_LEVEL': 'MSK_METADATA_LOG_LEVEL',
}
