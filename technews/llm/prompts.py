from typing import Sequence

from ..models import Article

analyst_preamble = (
    "You are a professional tech news analyst. Analyze the following technology news articles "
    "from the past week and create a comprehensive weekly summary.\n\n"
)

analysis_instructions = """
Please provide:
1. A concise executive summary (2-3 paragraphs) of the week's most important tech developments
2. Key topics and themes (list 3-5 main topics)
3. Top 3 trending stories with brief explanations
4. Notable insights or patterns across the news

Format your response in a clear, professional manner suitable for a weekly newsletter.
Use markdown formatting with headers (##) for sections.
"""


def build_analysis_prompt(articles: Sequence[Article]) -> str:
    """Compose the single prompt listing every article followed by the analysis instructions."""
    parts = [analyst_preamble, "Articles:\n\n"]

    for i, article in enumerate(articles, start=1):
        parts.append(f"{i}. Title: {article.title}\n")
        parts.append(f"   Source: {article.source}\n")
        parts.append(f"   Category: {article.category}\n")
        if article.description:
            parts.append(f"   Description: {article.description}\n")
        parts.append("\n")

    parts.append(analysis_instructions)
    return "".join(parts)
