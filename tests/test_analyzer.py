import asyncio
import re
from datetime import datetime, timezone
from types import SimpleNamespace

import google.generativeai as genai
import pytest

from fakes import FakeModel, make_response
from technews.llm import AIAnalyzer, EmptyInputError, GenerationError, format_week_range
from technews.llm.prompts import build_analysis_prompt
from technews.models import Article

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)

ANALYSIS = """## Executive Summary
AI research and quantum hardware led the week, while large firms doubled down on climate pledges.

## Key Topics
- Frontier AI models
- Quantum hardware

## Trending Stories
1. New language model beats human baselines
2. 1000-qubit processor unveiled
3. Tech firms pledge carbon neutrality by 2030
"""


async def _analyze(analyzer, articles, timeout=60.0):
    deadline = asyncio.get_running_loop().time() + timeout
    return await analyzer.analyze_news(articles, deadline, now=NOW)


def test_summary_from_mock_articles(mock_articles):
    model = FakeModel(response=make_response(ANALYSIS))
    analyzer = AIAnalyzer("key", "gemini-test", model=model)

    summary = asyncio.run(_analyze(analyzer, mock_articles))

    assert summary.total_articles == 3
    assert summary.summary == ANALYSIS
    assert summary.key_topics == ["Frontier AI models", "Quantum hardware"]
    assert summary.trending_stories == [
        "New language model beats human baselines",
        "1000-qubit processor unveiled",
        "Tech firms pledge carbon neutrality by 2030",
    ]
    assert summary.week_range == "Oct 12 - Oct 19, 2026"
    assert summary.generated_at == NOW


@pytest.mark.parametrize("count", [1, 4, 25])
def test_total_articles_matches_input_length(count):
    articles = [
        Article(title=f"Story {i}", url=f"https://example.com/{i}", source="Wire", category="technology")
        for i in range(count)
    ]
    analyzer = AIAnalyzer("key", "gemini-test", model=FakeModel(response=make_response("Plain summary.")))

    summary = asyncio.run(_analyze(analyzer, articles))

    assert summary.total_articles == count


def test_prompt_lists_every_article(mock_articles):
    extra = Article(title="Untitled launch", url="https://example.com/x", source="Wire", category="business")
    prompt = build_analysis_prompt(mock_articles + [extra])

    for i, article in enumerate(mock_articles, start=1):
        assert f"{i}. Title: {article.title}\n" in prompt
        assert f"   Source: {article.source}\n" in prompt
        assert f"   Category: {article.category}\n" in prompt
        assert f"   Description: {article.description}\n" in prompt
    assert "4. Title: Untitled launch\n   Source: Wire\n   Category: business\n\n" in prompt
    assert "Key topics and themes (list 3-5 main topics)" in prompt
    assert "Top 3 trending stories" in prompt
    assert "Use markdown formatting with headers (##) for sections." in prompt


def test_request_is_bounded_by_remaining_time(mock_articles):
    model = FakeModel(response=make_response(ANALYSIS))
    analyzer = AIAnalyzer("key", "gemini-test", model=model)

    asyncio.run(_analyze(analyzer, mock_articles, timeout=90.0))

    (prompt, request_options), = model.calls
    assert "Quantum Computing Reaches New Milestone" in prompt
    assert 0 < request_options["timeout"] <= 90.0


def test_empty_input_is_rejected_without_calling_model():
    model = FakeModel(response=make_response(ANALYSIS))
    analyzer = AIAnalyzer("key", "gemini-test", model=model)

    with pytest.raises(EmptyInputError):
        asyncio.run(_analyze(analyzer, []))
    assert model.calls == []


def test_model_error_becomes_generation_error(mock_articles):
    analyzer = AIAnalyzer("key", "gemini-test", model=FakeModel(error=RuntimeError("quota exceeded")))

    with pytest.raises(GenerationError, match="quota exceeded"):
        asyncio.run(_analyze(analyzer, mock_articles))


@pytest.mark.parametrize(
    "response",
    [
        SimpleNamespace(candidates=[]),
        SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[]))]),
        make_response(""),
    ],
)
def test_response_without_text_is_a_generation_error(mock_articles, response):
    analyzer = AIAnalyzer("key", "gemini-test", model=FakeModel(response=response))

    with pytest.raises(GenerationError, match="no response generated"):
        asyncio.run(_analyze(analyzer, mock_articles))


def test_slow_model_is_cut_off_at_deadline(mock_articles):
    model = FakeModel(response=make_response(ANALYSIS), delay=5.0)
    analyzer = AIAnalyzer("key", "gemini-test", model=model)

    with pytest.raises(GenerationError, match="no response within"):
        asyncio.run(_analyze(analyzer, mock_articles, timeout=0.05))


def test_expired_deadline_skips_the_request(mock_articles):
    model = FakeModel(response=make_response(ANALYSIS))
    analyzer = AIAnalyzer("key", "gemini-test", model=model)

    with pytest.raises(GenerationError, match="deadline"):
        asyncio.run(_analyze(analyzer, mock_articles, timeout=-1.0))
    assert model.calls == []


def test_closed_analyzer_refuses_work(mock_articles):
    analyzer = AIAnalyzer("key", "gemini-test", model=FakeModel(response=make_response(ANALYSIS)))

    analyzer.close()
    analyzer.close()

    assert analyzer.closed
    with pytest.raises(GenerationError, match="closed"):
        asyncio.run(_analyze(analyzer, mock_articles))


def test_context_manager_releases_model(mock_articles):
    async def scenario():
        async with AIAnalyzer("key", "gemini-test", model=FakeModel(response=make_response(ANALYSIS))) as analyzer:
            await _analyze(analyzer, mock_articles)
        return analyzer

    analyzer = asyncio.run(scenario())

    assert analyzer.closed


def test_week_range_covers_previous_seven_days():
    assert format_week_range(datetime(2026, 1, 3, 12, 0)) == "Dec 27 - Jan 03, 2026"


def test_timeout_message_reports_sub_second_budget(mock_articles):
    analyzer = AIAnalyzer("key", "gemini-test", model=FakeModel(response=make_response(ANALYSIS), delay=5.0))

    with pytest.raises(GenerationError) as exc_info:
        asyncio.run(_analyze(analyzer, mock_articles, timeout=0.3))

    assert re.search(r"no response within 0\.[1-3] seconds", str(exc_info.value))


def test_analyzer_configures_gemini_with_fixed_sampling(monkeypatch):
    configured = []
    built = []

    def fake_model(name, generation_config):
        built.append((name, generation_config))
        return FakeModel()

    monkeypatch.setattr(genai, "configure", lambda api_key: configured.append(api_key))
    monkeypatch.setattr(genai, "GenerativeModel", fake_model)

    analyzer = AIAnalyzer("secret", "gemini-test")

    assert configured == ["secret"]
    (name, config), = built
    assert name == analyzer.model_name == "gemini-test"
    assert (config.temperature, config.top_p, config.top_k, config.max_output_tokens) == (0.7, 0.9, 40, 2048)
