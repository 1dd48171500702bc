from __future__ import annotations

import json

import pytest

from novasearch.application.services.summarizer import Summarizer
from novasearch.domain.models.search import Intent, WebResult
from novasearch.domain.services.basic_summary import build_basic_summary

pytestmark = pytest.mark.anyio


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


RESULTS = [
    WebResult(title="Python docs", link="https://docs.python.org", source_name="Web"),
    WebResult(title="Real Python", link="https://realpython.com", source_name="Web"),
    WebResult(title="W3Schools", link="https://w3schools.com", source_name="W3Schools"),
    WebResult(title="GeeksforGeeks", link="https://geeksforgeeks.org", source_name="GfG"),
]


class _FakeLLM:
    def __init__(self, content: str = "", error: Exception | None = None) -> None:
        self._content = content
        self._error = error
        self.messages: list = []

    async def invoke(self, messages, response_format=None):  # noqa: ANN001
        self.messages = messages
        if self._error is not None:
            raise self._error
        return {"role": "assistant", "content": self._content}


class _FakeParser:
    async def invoke(self, text: str, default_value=None):  # noqa: ANN001
        return json.loads(text) if text.strip() else default_value


async def test_llm_summary_is_parsed() -> None:
    llm = _FakeLLM(
        json.dumps(
            {
                "summary": "Python is a programming language.",
                "recommendations": [
                    {"title": "Python docs", "reason": "Official", "link": "https://docs.python.org"},
                    {"reason": "missing title"},
                ],
                "suggestedQueries": ["python tutorial", "python install"],
            }
        )
    )
    summarizer = Summarizer(llm=llm, json_parser=_FakeParser())

    summary = await summarizer.summarize("what is python", RESULTS, Intent.LEARNING)

    assert summary.summary == "Python is a programming language."
    assert [r.title for r in summary.recommendations] == ["Python docs"]
    assert summary.suggested_queries == ["python tutorial", "python install"]
    assert "Real Python" in llm.messages[1]["content"]


async def test_llm_failure_returns_basic_summary() -> None:
    summarizer = Summarizer(llm=_FakeLLM(error=RuntimeError("down")), json_parser=_FakeParser())

    summary = await summarizer.summarize("what is python", RESULTS, Intent.LEARNING)

    assert summary == build_basic_summary("what is python", RESULTS, Intent.LEARNING)


async def test_empty_llm_summary_returns_basic_summary() -> None:
    summarizer = Summarizer(llm=_FakeLLM('{"summary": ""}'), json_parser=_FakeParser())

    summary = await summarizer.summarize("python", RESULTS, Intent.GENERAL)

    assert summary.summary
    assert len(summary.recommendations) == 3


def test_basic_summary_shape() -> None:
    summary = build_basic_summary("python", RESULTS, Intent.LEARNING)

    assert '"python"' in summary.summary
    assert "3 sources" in summary.summary
    assert [r.title for r in summary.recommendations] == [
        "Python docs",
        "Real Python",
        "W3Schools",
    ]
    assert summary.suggested_queries == ["how to python", "python tutorial", "python guide"]


def test_basic_summary_without_results() -> None:
    summary = build_basic_summary("zzqx", [], Intent.GENERAL)

    assert summary.summary.startswith('No results found for "zzqx"')
    assert summary.recommendations == []
