from technews.llm import DEFAULT_KEY_TOPICS, DEFAULT_TRENDING_STORIES, extract_insights

NEWSLETTER = """## Executive Summary
The week was dominated by new AI models and a surge in chip demand.

## Key Topics
- Generative AI adoption in enterprises
* Semiconductor supply chains

## Trending Stories
1. OpenAI ships a new reasoning model
2. Nvidia posts record quarterly revenue
3. EU finalizes AI Act guidance

## Notable Insights
Regulation is catching up with deployment.
"""


def test_topics_and_stories_are_extracted_without_markers():
    topics, stories = extract_insights(NEWSLETTER)

    assert topics == ["Generative AI adoption in enterprises", "Semiconductor supply chains"]
    assert stories == [
        "OpenAI ships a new reasoning model",
        "Nvidia posts record quarterly revenue",
        "EU finalizes AI Act guidance",
    ]


def test_extraction_is_deterministic():
    assert extract_insights(NEWSLETTER) == extract_insights(NEWSLETTER)


def test_no_bullets_after_topics_marker_yields_default_topics():
    text = "## Key Topics\nAI, cloud and security dominated the week.\n"

    topics, stories = extract_insights(text)

    assert topics == DEFAULT_KEY_TOPICS
    assert stories == DEFAULT_TRENDING_STORIES


def test_empty_text_yields_both_defaults():
    topics, stories = extract_insights("")

    assert topics == ["Artificial Intelligence", "Cloud Computing", "Cybersecurity"]
    assert stories == ["Major tech industry developments", "Innovation breakthroughs", "Market trends"]


def test_defaults_are_copies():
    topics, _ = extract_insights("")
    topics.append("Mutated")

    assert "Mutated" not in DEFAULT_KEY_TOPICS


def test_topic_list_is_capped_at_five():
    bullets = "\n".join(f"- Theme {i}" for i in range(1, 9))

    topics, _ = extract_insights(f"Main topics\n{bullets}")

    assert topics == [f"Theme {i}" for i in range(1, 6)]


def test_story_list_is_capped_at_three_and_accepts_bullets():
    text = "Trending now\n• First story\n- Second story\n4. Fourth story\n5. Fifth story\n"

    _, stories = extract_insights(text)

    assert stories == ["First story", "Second story", "Fourth story"]


def test_numbered_lines_are_ignored_in_topic_mode():
    text = "## Key Topics\n1. Not a bullet\n- Edge computing\n"

    topics, _ = extract_insights(text)

    assert topics == ["Edge computing"]


def test_bullets_outside_any_section_are_ignored():
    text = "- Stray bullet\n1. Stray number\n"

    topics, stories = extract_insights(text)

    assert topics == DEFAULT_KEY_TOPICS
    assert stories == DEFAULT_TRENDING_STORIES


def test_mode_switches_on_keyword_not_heading():
    # "Top" in a plain line switches from topics to stories
    text = "Key topics:\n- Robotics\nTop picks this week:\n- Robotaxi launch\n"

    topics, stories = extract_insights(text)

    assert topics == ["Robotics"]
    assert stories == ["Robotaxi launch"]


def test_markdown_headings_and_blank_lines_are_skipped():
    text = "## Key Topics\n\n### Subheading\n\n- Quantum networking\n"

    topics, _ = extract_insights(text)

    assert topics == ["Quantum networking"]
