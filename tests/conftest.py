"""Shared fixtures for maskedname tests."""

import logging
from collections.abc import Generator

import pytest
import structlog
from hypothesis import HealthCheck, settings

from maskedname.core.config import NameConfig, reset_config, set_config
from maskedname.core.name import MaskedName

# Property tests never change the config pinned by the autouse fixture
settings.register_profile(
    "maskedname", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("maskedname")


@pytest.fixture(autouse=True)
def default_config() -> Generator[NameConfig, None, None]:
    """Pin the global configuration to defaults, independent of the environment."""
    config = NameConfig()
    set_config(config)
    yield config
    reset_config()


@pytest.fixture
def strict_config() -> NameConfig:
    """Enable strict masking globally for one test."""
    config = NameConfig(strict_masking=True)
    set_config(config)
    return config


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """The package logger, with handlers, level and structlog config restored after the test."""
    logger = logging.getLogger("maskedname")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def domain_name() -> MaskedName:
    """Four-component dotted name."""
    return MaskedName(["oss", "cs", "fau", "de"])


@pytest.fixture
def slash_name() -> MaskedName:
    """Name using '/' as delimiter with escaped and unescaped specials."""
    return MaskedName(["usr", "a\\/b", "c.d"], "/")
