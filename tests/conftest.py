# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for TreePath tests."""

import tomllib

import pytest

from genro_treepath import ValueTree

SAMPLE_TOML = '''
ip = "127.0.0.1"

[host]
ip = "127.0.1.1"
port = 8080
protocol = ["tcp", "udp", "mmp"]

[misc]
int = 1234
float = 3.14
bool = true
date = 1979-05-27

[[service]]
name = "serv_1"
desc = "first service"

[[service]]
name = "serv_2"
desc = "second service"
'''


@pytest.fixture
def sample():
    """Sample document as parsed by tomllib."""
    return tomllib.loads(SAMPLE_TOML)


@pytest.fixture
def tree(sample):
    """ValueTree over the sample document."""
    return ValueTree(sample)


@pytest.fixture
def host_tree():
    """The host document used in the README scenarios."""
    return ValueTree(
        {'host': {'ip': '127.0.0.1', 'port': 8080, 'proto': ['tcp', 'udp']}}
    )
