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

"""pytest plugin providing MSK metadata fixtures.

Enabled automatically through the pytest11 entry point once the package is
installed. Log output goes to stderr only when MSK_METADATA_LOG_LEVEL or the
msk_metadata_log_level ini option is set; sinks added by the host suite are
left alone.
"""

import os
import pytest
import sys
from awslabs.msk_metadata.client import MskMetadataClient
from awslabs.msk_metadata.consts import ENV_VARS, LOG_LEVEL_INI
from awslabs.msk_metadata.helpers import new_msk_client
from awslabs.msk_metadata.session import get_aws_region
from awslabs.msk_metadata.testing import PytestTestingT
from loguru import logger
from typing import Optional


_handler_id: Optional[int] = None


def configure_logging(level: Optional[str] = None) -> Optional[int]:
    """Send loguru output to stderr at the given or configured level.

    Args:
        level: Log level; MSK_METADATA_LOG_LEVEL is used when not given

    Returns:
        The id of the stderr handler, or None when no level is configured
    """
    global _handler_id
    level = level or os.getenv(ENV_VARS['LOG_LEVEL'])
    if not level:
        return None
    remove_logging()
    _handler_id = logger.add(sys.stderr, level=level)
    return _handler_id


def remove_logging() -> None:
    """Remove the stderr handler added by configure_logging, if any."""
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None


def pytest_addoption(parser):
    """Register the msk_metadata_log_level ini option."""
    parser.addini(LOG_LEVEL_INI, 'loguru level for MSK metadata log output on stderr', default='')


def pytest_configure(config):
    """Configure logging when pytest starts."""
    configure_logging(config.getini(LOG_LEVEL_INI) or None)


def pytest_unconfigure(config):
    """Remove the plugin's log handler when pytest exits."""
    remove_logging()


@pytest.fixture
def msk_t() -> PytestTestingT:
    """Test context that fails the current test."""
    return PytestTestingT()


@pytest.fixture
def msk_region() -> str:
    """AWS region the MSK resources under test live in."""
    return get_aws_region()


@pytest.fixture
def msk_client(msk_t: PytestTestingT, msk_region: str) -> MskMetadataClient:
    """MSK metadata client for msk_region."""
    return new_msk_client(msk_t, msk_region)
