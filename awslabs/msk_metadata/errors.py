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

"""Error handling for the MSK metadata helpers."""

from botocore.exceptions import BotoCoreError, ClientError
from typing import Optional, Union


class MskMetadataError(Exception):
    """Base exception for MSK metadata errors."""

    pass


class AuthError(MskMetadataError):
    """Exception raised when an authenticated session cannot be created."""

    pass


class MskValidationError(MskMetadataError, ValueError):
    """Exception for arguments rejected before any remote call is made."""

    pass


class RemoteAPIError(MskMetadataError):
    """Exception for failed calls to the MSK management API."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        """Initialize RemoteAPIError with message, operation, error code, and status code."""
        super().__init__(message)
        self.operation = operation
        self.error_code = error_code
        self.status_code = status_code

    @classmethod
    def from_boto_error(
        cls, error: Union[ClientError, BotoCoreError], operation: str
    ) -> 'RemoteAPIError':
        """Build a RemoteAPIError describing a botocore failure.

        The caller is expected to raise the result ``from error`` so the
        original exception stays reachable as ``__cause__``.

        Args:
            error: The botocore exception raised by the SDK call
            operation: Name of the SDK operation, e.g. 'describe_cluster'

        Returns:
            RemoteAPIError: The translated error
        """
        if isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code', 'Unknown')
            error_message = error.response.get('Error', {}).get('Message', str(error))
            status_code = error.response.get('ResponseMetadata', {}).get('HTTPStatusCode')
            return cls(
                f'{operation} failed ({error_code}): {error_message}',
                operation=operation,
                error_code=error_code,
                status_code=status_code,
            )

        return cls(
            f'{operation} failed: {error}',
            operation=operation,
            error_code=type(error).__name__,
        )
