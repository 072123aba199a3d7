"""Pytest configuration and fixtures."""

import logging

import pytest

from tests.models import Dog, Human, make_humans


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up multiassert loggers after each test so handlers bind fresh streams."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("multiassert")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def humans() -> tuple[Human, Human]:
    return make_humans()


@pytest.fixture
def bob1(humans) -> Human:
    return humans[0]


@pytest.fixture
def bob2(humans) -> Human:
    return humans[1]


@pytest.fixture
def dog1(bob1) -> Dog:
    return bob1.dog
