"""Configures pytest further."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip the wide property sweeps")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run the huge operand depth checks")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: wide property sweeps, skipped with --skip-slow")
    config.addinivalue_line("markers", "extreme: huge operand depth checks, needs --run-extreme")


def pytest_collection_modifyitems(config, items):
    marks = {}
    if config.getoption("--skip-slow"):
        marks["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        marks["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    for item in items:
        for keyword, mark in marks.items():
            if keyword in item.keywords:
                item.add_marker(mark)
