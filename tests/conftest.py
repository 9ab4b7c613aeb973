"""Shared pytest fixtures."""
from __future__ import annotations

import pytest

from gql_api_tester.config import Config, Environment


@pytest.fixture
def sample_config() -> Config:
    """Three environments, only production carries its own endpoint."""

    return Config(
        environments=[
            Environment(name="test"),
            Environment(name="development"),
            Environment(name="production", graphql_endpoint="https://example.com/graphql"),
        ],
        default_environment="development",
        default_graphql_endpoint="localhost:3000/graphql",
    )


@pytest.fixture
def config_file(tmp_path, sample_config: Config):
    """Write sample_config to a YAML file and return its path."""

    path = tmp_path / "gql_api_tester.yml"
    path.write_text(sample_config.to_yaml(), encoding="utf-8")
    return path
