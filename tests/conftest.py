"""Shared pytest fixtures for isvalid tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# config covering an app with a view collection and a view, plus values the
# root marker rules out
SAMPLE_CONFIG_CONTENT = """\
instances:
  app:
    isApp: true
  pages:
    isApp: true
    isCollection: true
    isViews: true
  page:
    isApp: true
    isView: true
  partial:
    isApp: true
    _name: Partial
  file:
    isVinyl: true
    isFile: true
filters:
  renderables: [view, partial]
  collections: collection
  everything: "*"
"""


class Instance:
    """Plain attribute object standing in for a framework instance."""

    def __init__(self, name: str, **flags):
        self._name = name
        for key, value in flags.items():
            setattr(self, key, value)


@pytest.fixture
def app() -> Instance:
    return Instance("app", isApp=True)


@pytest.fixture
def collection() -> Instance:
    return Instance("collection", isApp=True, isCollection=True)


@pytest.fixture
def view() -> Instance:
    return Instance("view", isApp=True, isView=True)


@pytest.fixture
def sample_config_content() -> str:
    """Return sample config content as a string."""
    return SAMPLE_CONFIG_CONTENT


@pytest.fixture
def sample_config_path(tmp_path: Path, sample_config_content: str) -> Path:
    """Create a temp config file with sample data and return its path."""
    config_file = tmp_path / ".isvalid.yml"
    config_file.write_text(sample_config_content)
    return config_file
