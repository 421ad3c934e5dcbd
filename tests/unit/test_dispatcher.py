"""Unit tests for Dispatcher: every failure comes back as an error result."""

import asyncio

import pytest

from src.services.dispatcher import Dispatcher
from src.storage.resume_store import ResumeStore
from src.tools.catalog import build_registry
from src.tools.ping import PONG
from src.tools.registry import NoArguments, ToolDescriptor, ToolRegistry


def _failing_dispatcher():
    async def explode(args):
        raise RuntimeError("secret connection string leaked")

    registry = ToolRegistry()
    registry.register(ToolDescriptor("explode", "Always fails", NoArguments, explode))
    registry.freeze()
    return Dispatcher(registry)


@pytest.mark.unit
def test_dispatch_success(dispatcher):
    result = asyncio.run(dispatcher.dispatch("searchResume", {"query": "python"}))

    assert not result.is_error
    assert "🛠️ Technical Skill: Python" in result.text_content
    assert result.to_dict() == {
        "content": [{"type": "text", "text": result.text_content}],
        "structuredContent": {
            "query": "python",
            "hits": [{"category": "Technical Skill", "text": "Python", "index": None}],
        },
    }


@pytest.mark.unit
def test_dispatch_unknown_tool(dispatcher):
    result = asyncio.run(dispatcher.dispatch("unknownTool", {}))

    assert result.is_error
    assert result.error_kind == "UnknownTool"
    assert result.retryable is False
    assert "unknownTool" in result.text_content


@pytest.mark.unit
def test_dispatch_invalid_arguments_carries_field(dispatcher):
    result = asyncio.run(dispatcher.dispatch("searchResume", {}))

    assert result.is_error
    assert result.error_kind == "InvalidArguments"
    assert result.details["field"] == "query"
    assert result.details["reason"]

    envelope = result.to_dict()
    assert envelope["isError"] is True
    assert envelope["error"]["kind"] == "InvalidArguments"
    assert envelope["error"]["field"] == "query"


@pytest.mark.unit
def test_dispatch_document_unavailable_is_retryable(tmp_path):
    dispatcher = Dispatcher(build_registry(ResumeStore(path=tmp_path / "missing.json")))
    result = asyncio.run(dispatcher.dispatch("getResumeSummary", {}))

    assert result.is_error
    assert result.error_kind == "DocumentUnavailable"
    assert result.retryable is True

    # ping still works against the same broken store
    assert asyncio.run(dispatcher.dispatch("ping", {})).text_content == PONG


@pytest.mark.unit
def test_dispatch_hides_unexpected_errors():
    """Test that handler crashes become an opaque InternalFault."""
    result = asyncio.run(_failing_dispatcher().dispatch("explode", {}))

    assert result.is_error
    assert result.error_kind == "InternalFault"
    assert "secret" not in result.text_content
    assert "explode" in result.text_content


@pytest.mark.unit
def test_dispatch_logs_internal_fault(caplog):
    with caplog.at_level("ERROR", logger="src.services.dispatcher"):
        asyncio.run(_failing_dispatcher().dispatch("explode", {}))

    assert "Unexpected error in tool explode" in caplog.text
    assert "RuntimeError" in caplog.text


@pytest.mark.unit
def test_dispatch_is_repeatable(dispatcher):
    """Test that independent calls give identical answers."""
    first = asyncio.run(dispatcher.dispatch("getResume", {}))
    second = asyncio.run(dispatcher.dispatch("getResume", {}))
    assert first == second


@pytest.mark.unit
def test_dispatch_undecodable_file_is_document_unavailable(tmp_path):
    """Test that a non-UTF-8 resume file is reported as unavailable, not an internal fault."""
    path = tmp_path / "resume.json"
    path.write_bytes(b'{"personalInfo": {"name": "\xff\xfe"}}')
    dispatcher = Dispatcher(build_registry(ResumeStore(path=path)))

    result = asyncio.run(dispatcher.dispatch("getResumeSummary", {}))

    assert result.error_kind == "DocumentUnavailable"
    assert result.retryable is True
