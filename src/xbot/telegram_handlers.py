"""Telegram command handlers."""

import asyncio
import logging
import re

from telegram import Update
from telegram.ext import ContextTypes

from .config import load_config
from .telegram_format import send_markdown
from .workflows import NoteError, note_text_from_message, record_note_from_config

logger = logging.getLogger(__name__)

ECHO_COMMAND_RE = re.compile(r"^/echo(?:@\w+)?(?=\s|$)\s*", re.IGNORECASE)

COMMANDS = [
    ("note", "Note the input down"),
    ("echo", "Repeats back the provided text"),
    ("start", "Starts the bot and sends a welcome message"),
    ("help", "Shows available commands and their descriptions"),
]


# ============== Simple Commands ==============


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text(
        "Hello! Welcome to xbot. Type /help to see what I can do!"
    )


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    lines = [f"- /{name} - {description}" for name, description in COMMANDS]
    await send_markdown(
        update.message,
        "**Here are the available commands:**\n\n"
        + "\n".join(lines)
        + "\n\nAny other text is recorded as a note.",
    )


async def echo_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /echo command."""
    text = ECHO_COMMAND_RE.sub("", update.message.text or "", count=1)
    await update.message.reply_text(f"You said: {text}")


# ============== Notes ==============


async def note_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /note and plain messages by recording them in the notes document."""
    text = note_text_from_message(update.message.text or "")
    if not text:
        return

    config = load_config()
    try:
        # Store adapters are blocking HTTP/file I/O
        await asyncio.to_thread(record_note_from_config, config, text)
    except (NoteError, ValueError) as e:
        logger.error(f"Error occurred while recording note: {e}")
        await update.message.reply_text(
            f"Failed to record your note. Please try again later. (Error: {e})"
        )
        return

    await update.message.reply_text("Recorded successfully.")
