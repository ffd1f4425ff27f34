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

"""Calling conventions for use inside test suites.

Every query has a strict form, which returns its result or raises, and a
convenience form, which reports the error to the running test and aborts it.
``must_succeed`` turns the former into the latter for any callable.
"""

import functools
import pytest
from awslabs.msk_metadata.errors import MskMetadataError
from loguru import logger
from typing import Any, Callable, Protocol, TypeVar


T = TypeVar('T')


class TestingT(Protocol):
    """Anything with a fail(msg) method, such as unittest.TestCase."""

    def fail(self, msg: str) -> Any:
        """Mark the running test as failed."""
        ...


class AbortedTestError(AssertionError):
    """Raised when a test context's fail() returned instead of aborting."""

    pass


class PytestTestingT:
    """Test context that fails the current pytest test."""

    def fail(self, msg: str) -> Any:
        """Fail the current test through pytest.fail."""
        pytest.fail(msg, pytrace=False)


def must_succeed(t: TestingT, operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call operation and fail the test t if it raises an MSK metadata error.

    Args:
        t: Test context to report the failure to
        operation: The strict form of a query
        *args: Positional arguments for operation
        **kwargs: Keyword arguments for operation

    Returns:
        The result of operation

    Raises:
        AbortedTestError: If t.fail() returns without aborting the test
    """
    try:
        return operation(*args, **kwargs)
    except MskMetadataError as e:
        name = getattr(operation, '__name__', repr(operation))
        logger.error(f'{name} failed: {e}')
        t.fail(f'{name} failed: {e}')
        raise AbortedTestError(f'{name} failed: {e}') from e


class MustMskMetadataClient:
    """Routes every query of a client through must_succeed."""

    def __init__(self, client: Any, t: TestingT):
        """Wrap client, reporting failures to t."""
        self._client = client
        self._t = t

    def __getattr__(self, name: str) -> Any:
        """Return the named attribute, wrapping methods with must_succeed."""
        attr = getattr(self._client, name)
        if not callable(attr):
            return attr
        return functools.partial(must_succeed, self._t, attr)
