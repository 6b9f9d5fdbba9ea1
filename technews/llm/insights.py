"""Best-effort extraction of key topics and trending stories from free-text analysis."""

from typing import List, Tuple

MAX_KEY_TOPICS = 5
MAX_TRENDING_STORIES = 3

BULLET_PREFIXES = ("-", "*", "•")

DEFAULT_KEY_TOPICS = ["Artificial Intelligence", "Cloud Computing", "Cybersecurity"]
DEFAULT_TRENDING_STORIES = ["Major tech industry developments", "Innovation breakthroughs", "Market trends"]


def _strip_bullet(line: str) -> str:
    for prefix in BULLET_PREFIXES:
        line = line.removeprefix(prefix)
    return line


def _strip_numbering(line: str) -> str:
    if line[:1].isdigit():
        _, sep, rest = line.partition(".")
        if sep:
            return rest
    return line


def extract_insights(text: str) -> Tuple[List[str], List[str]]:
    """Scan the analysis line by line for key topics and trending stories.

    A line mentioning "key topics" or "main topics" switches to topic collection,
    a line mentioning "trending" or "top" switches to story collection. Topics are
    taken from bulleted lines, stories from bulleted or numbered lines. When nothing
    is found the generic defaults are returned instead of empty lists.

    Args:
        text: Free-text analysis returned by the model

    Returns:
        Tuple of (key topics, trending stories)
    """
    key_topics: List[str] = []
    trending_stories: List[str] = []

    in_key_topics = False
    in_trending_stories = False

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        lowered = line.lower()

        if "key topics" in lowered or "main topics" in lowered:
            in_key_topics = True
            in_trending_stories = False
            continue

        if "trending" in lowered or "top" in lowered:
            in_trending_stories = True
            in_key_topics = False
            continue

        if not line or line.startswith("#"):
            continue

        is_bullet = line.startswith(BULLET_PREFIXES)

        if in_key_topics and is_bullet:
            topic = _strip_bullet(line).strip()
            if topic and len(key_topics) < MAX_KEY_TOPICS:
                key_topics.append(topic)

        if in_trending_stories and (is_bullet or line[0].isdigit()):
            story = _strip_numbering(_strip_bullet(line)).strip()
            if story and len(trending_stories) < MAX_TRENDING_STORIES:
                trending_stories.append(story)

    if not key_topics:
        key_topics = list(DEFAULT_KEY_TOPICS)
    if not trending_stories:
        trending_stories = list(DEFAULT_TRENDING_STORIES)

    return key_topics, trending_stories
