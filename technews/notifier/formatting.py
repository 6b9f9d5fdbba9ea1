"""Telegram message formatting for weekly summaries."""

from typing import List

from ..models import NewsSummary

# Telegram rejects messages longer than 4096 characters
MAX_MESSAGE_LENGTH = 4000

DIVIDER = "━━━━━━━━━━━━━━━━━"


def format_summary_message(summary: NewsSummary) -> str:
    """Format a summary into one Markdown document.

    Args:
        summary: Summary to format

    Returns:
        Message in the format:
        📰 *Weekly Tech News Summary*
        📅 *{week_range}*
        📊 Articles analyzed: {total_articles}

        {summary}

        🔑 *Key Topics*         # omitted if there are no topics
        🔥 *Trending Stories*   # omitted if there are no stories
        🤖 Generated on {generated_at}
    """
    lines = [
        "📰 *Weekly Tech News Summary*",
        f"📅 *{summary.week_range}*",
        f"📊 Articles analyzed: {summary.total_articles}",
        "",
        DIVIDER,
        "",
        summary.summary,
        "",
    ]

    if summary.key_topics:
        lines.append(DIVIDER)
        lines.append("🔑 *Key Topics*")
        lines.append("")
        lines.extend(f"• {topic}" for topic in summary.key_topics)
        lines.append("")

    if summary.trending_stories:
        lines.append(DIVIDER)
        lines.append("🔥 *Trending Stories*")
        lines.append("")
        lines.extend(f"{i}. {story}" for i, story in enumerate(summary.trending_stories, start=1))
        lines.append("")

    lines.append(DIVIDER)
    lines.append(f"🤖 Generated on {summary.generated_at.strftime('%b %d, %Y %H:%M %Z').rstrip()}")
    lines.append("_Powered by Gemini AI_")

    return "\n".join(lines)


def format_error_message(error: str) -> str:
    return f"⚠️ *Tech News Agent Error*\n\n```\n{error}\n```"


def split_message(message: str, max_length: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """Split a message into chunks of at most max_length characters.

    Lines are kept whole: a chunk is closed before the line that would make it too long.
    A single line longer than max_length becomes its own oversized chunk.

    Args:
        message: Text to split
        max_length: Maximum chunk length

    Returns:
        Ordered chunks; joining them with newlines restores the message
    """
    if len(message) <= max_length:
        return [message]

    chunks: List[str] = []
    current: List[str] = []
    current_length = 0

    for line in message.split("\n"):
        added = len(line) + 1 if current else len(line)
        if current and current_length + added > max_length:
            chunks.append("\n".join(current))
            current = []
            current_length = 0
            added = len(line)

        current.append(line)
        current_length += added

    if current:
        chunks.append("\n".join(current))

    return chunks
