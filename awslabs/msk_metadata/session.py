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

"""Authenticated boto3 session provider."""

import boto3
import os
from awslabs.msk_metadata.consts import (
    ASSUME_ROLE_SESSION_NAME,
    DEFAULT_AWS_REGION,
    ENV_VARS,
)
from awslabs.msk_metadata.errors import AuthError
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound
from loguru import logger
from typing import Callable


SessionProvider = Callable[[str], boto3.Session]


def get_aws_region() -> str:
    """Get AWS region from environment or default to us-east-1."""
    return os.getenv(
        ENV_VARS['AWS_REGION'], os.getenv(ENV_VARS['AWS_DEFAULT_REGION'], DEFAULT_AWS_REGION)
    )


def new_authenticated_session(region: str) -> boto3.Session:
    """Create a boto3 session for the given region with verified credentials.

    Credentials come from the default boto3 chain, using the profile named by
    AWS_PROFILE when it is set. When MSK_METADATA_IAM_ROLE is set, that role is
    assumed and the returned session carries its temporary credentials.

    Args:
        region: AWS region name

    Returns:
        boto3.Session scoped to the region

    Raises:
        AuthError: If no session with usable credentials can be created
    """
    if not region:
        raise AuthError('A region is required to create an authenticated session')

    profile_name = os.getenv(ENV_VARS['AWS_PROFILE']) or None
    try:
        session = boto3.Session(profile_name=profile_name, region_name=region)
    except ProfileNotFound as e:
        logger.error(f'AWS profile {profile_name} not found')
        raise AuthError(f'AWS profile {profile_name} not found') from e

    role_arn = os.getenv(ENV_VARS['IAM_ROLE'])
    if role_arn:
        session = _assume_role_session(session, role_arn, region)

    if session.get_credentials() is None:
        logger.error('AWS credentials not found. Please configure your AWS credentials.')
        raise AuthError(
            f'No AWS credentials found for region {region}. Please configure your AWS credentials.'
        )

    logger.debug(f'Created authenticated session for region: {region}')
    return session


def _assume_role_session(session: boto3.Session, role_arn: str, region: str) -> boto3.Session:
    try:
        response = session.client('sts').assume_role(
            RoleArn=role_arn, RoleSessionName=ASSUME_ROLE_SESSION_NAME
        )
    except (ClientError, BotoCoreError) as e:
        logger.error(f'Failed to assume role {role_arn}: {e}')
        raise AuthError(f'Failed to assume role {role_arn}: {e}') from e

    credentials = response['Credentials']
    logger.debug(f'Assumed role {role_arn}')
    return boto3.Session(
        aws_access_key_id=credentials['AccessKeyId'],
        aws_secret_access_key=credentials['SecretAccessKey'],
        aws_session_token=credentials['SessionToken'],
        region_name=region,
    )
