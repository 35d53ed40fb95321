"""xbot Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
)

from .config import load_config
from .telegram_handlers import (
    COMMANDS,
    start_handler,
    help_handler,
    echo_handler,
    note_handler,
)

logger = logging.getLogger(__name__)


class AuthFilter(filters.UpdateFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def filter(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


async def unauthorized_handler(update: Update, context):
    """Refuse users outside the allowlist."""
    user = update.effective_user
    if user is not None:
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
    if update.message:
        await update.message.reply_text("You are not authorized to use this bot.")


async def register_commands(application: Application) -> None:
    """Publish the command menu shown when typing / in Telegram."""
    await application.bot.set_my_commands(COMMANDS)
    logger.info(f"Registered {len(COMMANDS)} bot commands")


def create_application(config=None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to xbot.conf"
        )

    app = (
        Application.builder()
        .token(config.telegram_bot_token)
        .post_init(register_commands)
        .build()
    )

    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(CommandHandler("echo", echo_handler, filters=auth_filter))
    app.add_handler(CommandHandler("note", note_handler, filters=auth_filter))

    # Anything that isn't a known command is a note
    app.add_handler(
        MessageHandler(auth_filter & filters.TEXT & ~filters.COMMAND, note_handler)
    )

    if config.telegram_allowed_users:
        app.add_handler(
            MessageHandler(~auth_filter & filters.ALL, unauthorized_handler)
        )

    return app


def run_bot():
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    config = load_config()
    app = create_application(config)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting xbot Telegram bot...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
