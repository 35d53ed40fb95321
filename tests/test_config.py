"""Tests for xbot.conf parsing."""

from unittest.mock import patch

import pytest

from xbot.config import Config, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


def _load(tmp_path, text: str) -> Config:
    config_file = tmp_path / "xbot.conf"
    config_file.write_text(text)
    with patch("xbot.config.CONFIG_FILE", config_file):
        return load_config()


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        with patch("xbot.config.CONFIG_FILE", tmp_path / "absent.conf"):
            config = load_config()
        assert config == Config()
        assert config.github_branch_name == "main"
        assert config.timezone == "UTC"

    def test_parses_github_settings(self, tmp_path):
        config = _load(
            tmp_path,
            "# notes repo\n"
            "GITHUB_TOKEN=ghp_abc\n"
            "GITHUB_REPO_OWNER=me\n"
            "GITHUB_REPO_NAME = notes\n"
            'GITHUB_FILE_PATH="log/2024.md"  # yearly log\n'
            "GITHUB_BRANCH_NAME='dev'\n"
            'GITHUB_COMMIT_MESSAGE="Add note # from bot"\n',
        )
        assert config.github_token == "ghp_abc"
        assert config.github_repo_owner == "me"
        assert config.github_repo_name == "notes"
        assert config.github_file_path == "log/2024.md"
        assert config.github_branch_name == "dev"
        assert config.github_commit_message == "Add note # from bot"
        assert config.github_configured()

    def test_unquoted_inline_comment_is_stripped(self, tmp_path):
        config = _load(tmp_path, "TIMEZONE=Europe/Berlin # home\n")
        assert config.timezone == "Europe/Berlin"

    def test_parses_allowed_users(self, tmp_path):
        config = _load(tmp_path, "TELEGRAM_ALLOWED_USERS=123, 456,,789\n")
        assert config.telegram_allowed_users == [123, 456, 789]

    def test_skips_invalid_user_ids(self, tmp_path):
        config = _load(tmp_path, "TELEGRAM_ALLOWED_USERS=123,abc\n")
        assert config.telegram_allowed_users == [123]

    def test_ignores_junk_lines(self, tmp_path):
        config = _load(tmp_path, "not a setting\nUNKNOWN_KEY=1\nNOTES_DIR=~/notes\n")
        assert config.notes_dir == "~/notes"

    def test_environment_overrides_secrets(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "from-env")
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_env")
        config = _load(tmp_path, "TELEGRAM_BOT_TOKEN=from-file\n")
        assert config.telegram_bot_token == "from-env"
        assert config.github_token == "ghp_env"


class TestGithubConfigured:
    def test_missing_settings_listed(self):
        config = Config(github_token="t", github_repo_owner="me")
        assert not config.github_configured()
        assert config.missing_github_settings() == ["GITHUB_REPO_NAME", "GITHUB_FILE_PATH"]

    def test_empty_branch_counts_as_missing(self):
        config = Config(
            github_token="t",
            github_repo_owner="me",
            github_repo_name="n",
            github_file_path="f.md",
            github_branch_name="",
        )
        assert config.missing_github_settings() == ["GITHUB_BRANCH_NAME"]
