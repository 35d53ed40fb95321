"""xbot CLI - notes from the terminal, and the bot launcher."""

import sys
from datetime import date
from pathlib import Path

import click

from .config import CONFIG_FILE, load_config
from .core.notes import merge_note
from .workflows import NoteError, get_store, record_note, today_for


def _mask(secret: str) -> str:
    if not secret:
        return "(not set)"
    return f"{secret[:4]}...{secret[-2:]}" if len(secret) > 8 else "****"


@click.group()
@click.version_option()
def main():
    """xbot - Personal Assistant CLI."""
    pass


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--date", "-d", "target_date", default=None,
              help="Date to file the note under (YYYY-MM-DD), defaults to today")
def note(text: tuple[str, ...], target_date: str | None):
    """Record a note in the notes document."""
    config = load_config()
    content = " ".join(text).strip()
    if not content:
        click.echo("Nothing to record.", err=True)
        sys.exit(1)

    try:
        store, path = get_store(config)
        target = date.fromisoformat(target_date) if target_date else today_for(config)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        record_note(store, path, content, target, config.github_commit_message)
    except NoteError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Recorded note under {target.isoformat()} in {path}.")


@main.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--text", "-t", required=True, help="Note content to merge")
@click.option("--date", "-d", "target_date", default=None,
              help="Date to file the note under (YYYY-MM-DD), defaults to today")
@click.option("--in-place", "-i", is_flag=True, help="Write the result back to FILE")
def merge(file: Path, text: str, target_date: str | None, in_place: bool):
    """Merge a note into a local notes FILE without any store."""
    try:
        target = date.fromisoformat(target_date) if target_date else today_for(load_config())
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    current = file.read_text(encoding="utf-8") if file.exists() else ""
    updated = merge_note(current, target, text)

    if in_place:
        file.write_text(updated, encoding="utf-8")
        click.echo(f"Updated {file}")
    else:
        click.echo(updated, nl=False)


@main.command()
def check():
    """Show which settings are configured."""
    config = load_config()

    click.echo(f"Config file: {CONFIG_FILE}{'' if CONFIG_FILE.exists() else ' (missing)'}")
    click.echo(f"Telegram bot token: {_mask(config.telegram_bot_token)}")
    users = ", ".join(str(u) for u in config.telegram_allowed_users) or "(anyone)"
    click.echo(f"Allowed users: {users}")
    click.echo(f"Timezone: {config.timezone}")

    if config.github_configured():
        click.echo(f"GitHub token: {_mask(config.github_token)}")
        click.echo(
            f"Notes: github {config.github_repo_owner}/{config.github_repo_name}"
            f"@{config.github_branch_name}:{config.github_file_path}"
        )
    elif config.notes_dir:
        click.echo(f"Notes: local {Path(config.notes_dir).expanduser() / config.notes_file}")
    else:
        missing = ", ".join(config.missing_github_settings())
        click.echo(f"Notes: not configured (missing {missing}, or set NOTES_DIR)")


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def bot(debug: bool):
    """Run the Telegram bot."""
    import logging

    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        from .telegram_bot import run_bot
        click.echo("Starting xbot Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot()
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")
