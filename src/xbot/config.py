"""Configuration management for xbot."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

XBOT_HOME = Path(os.environ.get("XBOT_HOME", Path.home() / "xbot"))
CONFIG_FILE = XBOT_HOME / "config" / "xbot.conf"

# Secrets that may come from the environment instead of xbot.conf
ENV_OVERRIDES = ("telegram_bot_token", "github_token")


@dataclass
class Config:
    """xbot configuration."""

    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)
    timezone: str = "UTC"
    # GitHub-hosted notes document
    github_token: str = ""
    github_repo_owner: str = ""
    github_repo_name: str = ""
    github_file_path: str = ""
    github_branch_name: str = "main"
    github_commit_message: str = "Add note via xbot"
    # Local notes document (used when GitHub is not configured)
    notes_dir: str = ""
    notes_file: str = "notes.md"

    def github_configured(self) -> bool:
        """Whether every setting the GitHub store needs is present."""
        return not self.missing_github_settings()

    def missing_github_settings(self) -> list[str]:
        """Names of the GitHub settings that are still empty."""
        required = {
            "GITHUB_TOKEN": self.github_token,
            "GITHUB_REPO_OWNER": self.github_repo_owner,
            "GITHUB_REPO_NAME": self.github_repo_name,
            "GITHUB_FILE_PATH": self.github_file_path,
            "GITHUB_BRANCH_NAME": self.github_branch_name,
        }
        return [name for name, value in required.items() if not value]


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value.startswith('"'):
        end_quote = value.find('"', 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if value.startswith("'"):
        end_quote = value.find("'", 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    users = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            users.append(int(entry))
        except ValueError:
            logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry: {entry!r}")
    return users


def load_config() -> Config:
    """Load configuration from xbot.conf, then apply environment overrides."""
    config = Config()

    if CONFIG_FILE.exists():
        for line in CONFIG_FILE.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "telegram_bot_token":
                    config.telegram_bot_token = value
                case "telegram_allowed_users":
                    config.telegram_allowed_users = _parse_user_ids(value)
                case "timezone":
                    config.timezone = value
                case "github_token":
                    config.github_token = value
                case "github_repo_owner":
                    config.github_repo_owner = value
                case "github_repo_name":
                    config.github_repo_name = value
                case "github_file_path":
                    config.github_file_path = value
                case "github_branch_name":
                    config.github_branch_name = value
                case "github_commit_message":
                    config.github_commit_message = value
                case "notes_dir":
                    config.notes_dir = value
                case "notes_file":
                    config.notes_file = value
                case _:
                    logger.debug(f"Unknown config key: {key}")

    for key in ENV_OVERRIDES:
        value = os.environ.get(key.upper())
        if value:
            setattr(config, key, value)

    return config
