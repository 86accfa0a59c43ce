"""Shared fixtures: every test runs with default configuration in an empty directory."""

import pytest

from column_summaries.config import reset_config

ENV_VARS = (
    'COLUMN_SUMMARIES_CONFIG',
    'COLUMN_SUMMARIES_LOG_LEVEL',
    'COLUMN_SUMMARIES_DISPLAY_LIMIT',
    'COLUMN_SUMMARIES_DATE_FORMAT',
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield tmp_path
    reset_config()
