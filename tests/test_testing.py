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

"""Tests for must_succeed and the test context adapters."""

import pytest
import unittest
from awslabs.msk_metadata.errors import AuthError, RemoteAPIError
from awslabs.msk_metadata.testing import AbortedTestError, PytestTestingT, must_succeed
from unittest.mock import Mock


def get_brokers(cluster_arn, tls=False):
    """Stand-in for a strict query."""
    return f'{cluster_arn}:{9094 if tls else 9092}'


def failing_query(*args, **kwargs):
    """Stand-in for a strict query that fails remotely."""
    raise RemoteAPIError('describe_cluster failed (NotFoundException): no such cluster')


class TestMustSucceed:
    """Tests for must_succeed function."""

    def test_returns_result(self):
        """Test that the bare result is returned on success."""
        t = Mock()

        result = must_succeed(t, get_brokers, 'b-1', tls=True)

        assert result == 'b-1:9094'
        t.fail.assert_not_called()

    def test_fails_test_context(self):
        """Test that t.fail receives the error text."""
        t = Mock()

        with pytest.raises(AbortedTestError):
            must_succeed(t, failing_query, 'arn')

        t.fail.assert_called_once()
        message = t.fail.call_args[0][0]
        assert message.startswith('failing_query failed:')
        assert 'no such cluster' in message

    def test_aborts_even_if_fail_returns(self):
        """Test that no result is returned when t.fail does not raise."""
        t = Mock()
        t.fail.return_value = 'ignored'

        with pytest.raises(AbortedTestError) as exc_info:
            must_succeed(t, failing_query)

        assert isinstance(exc_info.value.__cause__, RemoteAPIError)

    def test_auth_error_fails_test_context(self):
        """Test that AuthError is reported the same way."""
        t = Mock()
        construct = Mock(side_effect=AuthError('no credentials'))
        construct.__name__ = 'new_msk_client_e'

        with pytest.raises(AbortedTestError):
            must_succeed(t, construct, 'us-west-2')

        assert t.fail.call_args[0][0] == 'new_msk_client_e failed: no credentials'

    def test_other_errors_propagate(self):
        """Test that unrelated exceptions are not converted."""
        t = Mock()
        operation = Mock(side_effect=KeyError('ClusterInfo'))

        with pytest.raises(KeyError):
            must_succeed(t, operation)

        t.fail.assert_not_called()


class TestPytestTestingT:
    """Tests for PytestTestingT."""

    def test_fail_fails_current_test(self):
        """Test that fail() raises pytest's failure outcome."""
        with pytest.raises(pytest.fail.Exception) as exc_info:
            PytestTestingT().fail('broker string missing')

        assert 'broker string missing' in str(exc_info.value)

    def test_must_succeed_with_pytest_context(self):
        """Test must_succeed aborting through pytest.fail."""
        with pytest.raises(pytest.fail.Exception):
            must_succeed(PytestTestingT(), failing_query)


class TestMustSucceedWithTestCase(unittest.TestCase):
    """unittest.TestCase works as a test context without an adapter."""

    def test_test_case_as_context(self):
        """Test that TestCase.fail aborts with the error text."""
        with self.assertRaises(self.failureException) as cm:
            must_succeed(self, failing_query)

        self.assertIn('no such cluster', str(cm.exception))

    def test_test_case_success(self):
        """Test that the result passes through."""
        self.assertEqual(must_succeed(self, get_brokers, 'b-2'), 'b-2:9092')
