"""
MCP Tool: getResumeSummary — a short formatted digest of the resume.
"""

from __future__ import annotations

from src.agents.resume_query import ResumeQueryAgent
from src.storage.resume_store import ResumeStore

DESCRIPTION = "Get a formatted summary of the resume"


async def get_resume_summary(store: ResumeStore) -> str:
    """Summarise name, contact, current role, education, top skills and summary."""
    return ResumeQueryAgent().summarize(store.load())
