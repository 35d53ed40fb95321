"""Telegram message formatting utilities."""

import telegramify_markdown

# Telegram rejects messages over 4096 characters
MAX_MESSAGE_LENGTH = 4000


def chunk_text(text: str, size: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split text into Telegram-sized chunks, preferring line boundaries."""
    chunks: list[str] = []
    current = ""
    for line in text.splitlines(keepends=True):
        while len(line) > size:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:size])
            line = line[size:]
        if len(current) + len(line) > size:
            chunks.append(current)
            current = ""
        current += line
    if current:
        chunks.append(current)
    return chunks


async def send_markdown(message, text: str):
    """Reply to a message with markdown text converted to MarkdownV2."""
    converted = telegramify_markdown.markdownify(text)
    for chunk in chunk_text(converted):
        await message.reply_text(chunk, parse_mode="MarkdownV2")
