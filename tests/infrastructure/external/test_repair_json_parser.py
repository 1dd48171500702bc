import pytest

from novasearch.infrastructure.external.json_parser import RepairJSONParser

pytestmark = pytest.mark.anyio


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


async def test_parses_fenced_and_truncated_json() -> None:
    parser = RepairJSONParser()

    assert await parser.invoke('```json\n{"intent": "news"}\n```') == {"intent": "news"}
    assert await parser.invoke('{"summary": "ok", "recommendations": [') == {
        "summary": "ok",
        "recommendations": [],
    }


async def test_empty_text_uses_default_or_raises() -> None:
    parser = RepairJSONParser()

    assert await parser.invoke("  ", default_value={}) == {}
    with pytest.raises(ValueError):
        await parser.invoke("")
