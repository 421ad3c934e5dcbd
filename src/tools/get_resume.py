"""
MCP Tool: getResume — return the complete resume document.
"""

from __future__ import annotations

import json

from src.agents.resume_query import ResumeQueryAgent
from src.storage.resume_store import ResumeStore

DESCRIPTION = "Get complete resume data in JSON format"


async def get_resume(store: ResumeStore) -> str:
    """
    Render the full resume as indented JSON.

    Every field present in the stored document appears unchanged in the output.
    """
    document = ResumeQueryAgent().get_full(store.load())
    payload = json.dumps(document.to_wire(), indent=2, ensure_ascii=False)
    return f"Here's the complete resume data:\n\n{payload}"
