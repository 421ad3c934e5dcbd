"""
Tool catalog — registers the resume tools against a document store.
"""

from __future__ import annotations

from src.storage.resume_store import ResumeStore
from src.tools import get_resume, get_resume_summary, ping, search_resume
from src.tools.registry import NoArguments, ToolDescriptor, ToolRegistry


def build_registry(store: ResumeStore) -> ToolRegistry:
    """Create a frozen registry holding getResume, getResumeSummary, searchResume and ping."""
    registry = ToolRegistry()

    registry.register(ToolDescriptor(
        name="getResume",
        description=get_resume.DESCRIPTION,
        input_model=NoArguments,
        handler=lambda args: get_resume.get_resume(store),
    ))
    registry.register(ToolDescriptor(
        name="getResumeSummary",
        description=get_resume_summary.DESCRIPTION,
        input_model=NoArguments,
        handler=lambda args: get_resume_summary.get_resume_summary(store),
    ))
    registry.register(ToolDescriptor(
        name="searchResume",
        description=search_resume.DESCRIPTION,
        input_model=search_resume.SearchResumeInput,
        handler=lambda args: search_resume.search_resume(store, args.query),
    ))
    registry.register(ToolDescriptor(
        name="ping",
        description=ping.DESCRIPTION,
        input_model=NoArguments,
        handler=lambda args: ping.ping(),
    ))

    registry.freeze()
    return registry
