"""
MCP Tool: searchResume — keyword search through the resume.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from src.agents.resume_query import ResumeQueryAgent
from src.storage.resume_store import ResumeStore
from src.tools.result import ToolResult

DESCRIPTION = "Search through resume content by keyword"


class SearchResumeInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    query: StrictStr = Field(
        ...,
        min_length=0,
        description="Search query to find in resume",
    )


async def search_resume(store: ResumeStore, query: str) -> ToolResult:
    """
    Search experience, achievements, technical skills and projects for `query`.

    Args:
        store: Source of the resume document
        query: Case-insensitive substring; an empty query matches every field

    Returns:
        The rendered listing (or a "No results found" message) as text,
        with the individual hits as structured content
    """
    agent = ResumeQueryAgent()
    hits = agent.find_matches(store.load(), query)
    return ToolResult.text(
        agent.format_results(query, hits),
        structured_content={
            "query": query,
            "hits": [
                {"category": hit.category, "text": hit.text, "index": hit.index}
                for hit in hits
            ],
        },
    )
