"""
설정 해석 테스트
"""
from __future__ import annotations

import pytest

from down_roadmap.core.config import CONFIG, resolve_notion_settings
from down_roadmap.domain.exceptions import ConfigurationError

FULL_ENV = {
    "NOTION_API_TOKEN": "env-token",
    "NOTION_DATASOURCE_EXPERIMENTS": "env-exp",
    "NOTION_DATASOURCE_RELEASES": "env-rel",
}


def test_resolve_from_environment():
    settings = resolve_notion_settings(environ=FULL_ENV)

    assert settings.token == "env-token"
    assert settings.experiments_source == "env-exp"
    assert settings.releases_source == "env-rel"


def test_integration_secret_is_accepted_as_token():
    env = {**FULL_ENV, "NOTION_API_TOKEN": "", "NOTION_INTEGRATION_SECRET": "integration"}

    assert resolve_notion_settings(environ=env).token == "integration"


def test_secrets_take_precedence():
    secrets = {"api_token": "secret-token", "experiments_source": "secret-exp"}

    settings = resolve_notion_settings(secrets, environ=FULL_ENV)

    assert settings.token == "secret-token"
    assert settings.experiments_source == "secret-exp"
    assert settings.releases_source == "env-rel"


def test_missing_token():
    env = {key: value for key, value in FULL_ENV.items() if key != "NOTION_API_TOKEN"}

    with pytest.raises(ConfigurationError, match="Missing Notion token"):
        resolve_notion_settings(environ=env)


@pytest.mark.parametrize("missing", ["NOTION_DATASOURCE_EXPERIMENTS", "NOTION_DATASOURCE_RELEASES"])
def test_missing_source(missing):
    env = {key: value for key, value in FULL_ENV.items() if key != missing}

    with pytest.raises(ConfigurationError, match=f"Missing required env var: {missing}"):
        resolve_notion_settings(environ=env)


def test_defaults_from_os_environ():
    """conftest가 설정한 테스트용 환경변수를 사용"""
    settings = resolve_notion_settings()

    assert settings.token


def test_layout_constants():
    assert CONFIG.view.window_months == 3
    assert CONFIG.notion.fallback_statuses == (400, 404)
