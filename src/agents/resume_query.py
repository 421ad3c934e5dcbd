"""
Resume Query Agent — turns the structured resume into readable answers.

Three operations, all stateless functions of (document, input):
- full document passthrough (a detached copy)
- a fixed-format summary digest
- case-insensitive keyword search across experience, skills and projects
"""

from __future__ import annotations

from dataclasses import dataclass

from src.models.resume import ResumeDocument

NOT_SPECIFIED = "Not specified"
TOP_SKILLS_LIMIT = 5


@dataclass(frozen=True)
class SearchHit:
    """One matching field, tagged with where it came from."""

    category: str
    text: str
    index: int | None = None
    icon: str = "•"

    def render(self) -> str:
        label = self.category if self.index is None else f"{self.category} {self.index}"
        return f"{self.icon} {label}: {self.text}"


class ResumeQueryAgent:
    """Answers questions about a resume document."""

    def get_full(self, document: ResumeDocument) -> ResumeDocument:
        """Return a deep copy, so callers cannot reach the stored instance."""
        return document.model_copy(deep=True)

    def summarize(self, document: ResumeDocument) -> str:
        """
        Build a short natural-language digest of the resume.

        Picks the first experience entry marked current and the first
        education entry; missing data renders as "Not specified".
        """
        info = document.personal_info

        current = next((exp for exp in document.experience if exp.current), None)
        current_role = f"{current.position} at {current.company}" if current else NOT_SPECIFIED

        if document.education:
            edu = document.education[0]
            education = f"{edu.degree} in {edu.field} from {edu.institution}"
        else:
            education = NOT_SPECIFIED

        top_skills = ", ".join(document.skills.technical[:TOP_SKILLS_LIMIT]) or NOT_SPECIFIED

        lines = [
            "📋 Resume Summary:",
            "",
            f"👤 {info.name}",
            f"📧 {info.email or NOT_SPECIFIED}",
            f"📍 {info.location or NOT_SPECIFIED}",
            "",
            f"💼 Current Role: {current_role}",
            f"🎓 Education: {education}",
            f"⭐ Top Skills: {top_skills}",
            f"🏆 Experience: {len(document.experience)} positions listed",
            "",
            f"📄 Summary: {document.summary or NOT_SPECIFIED}",
        ]
        return "\n".join(lines)

    def find_matches(self, document: ResumeDocument, query: str) -> list[SearchHit]:
        """
        Collect every field containing `query`, case-insensitively.

        Order follows the document: each experience entry then its
        achievements, then technical skills, then projects. An empty
        query matches every searchable field.
        """
        term = query.lower()
        hits: list[SearchHit] = []

        for i, exp in enumerate(document.experience, 1):
            if any(term in value.lower() for value in (exp.company, exp.position, exp.description)):
                hits.append(SearchHit(
                    "Experience",
                    f"{exp.position} at {exp.company} - {exp.description}",
                    index=i, icon="🏢",
                ))
            for achievement in exp.achievements:
                if term in achievement.lower():
                    hits.append(SearchHit("Achievement", achievement, icon="🎯"))

        for skill in document.skills.technical:
            if term in skill.lower():
                hits.append(SearchHit("Technical Skill", skill, icon="🛠️"))

        for i, project in enumerate(document.projects, 1):
            if term in project.name.lower() or term in project.description.lower():
                hits.append(SearchHit(
                    "Project",
                    f"{project.name} - {project.description}",
                    index=i, icon="🚀",
                ))

        return hits

    def search(self, document: ResumeDocument, query: str) -> str:
        """Search the resume and render the hits, or a no-results message."""
        return self.format_results(query, self.find_matches(document, query))

    @staticmethod
    def format_results(query: str, hits: list[SearchHit]) -> str:
        if not hits:
            return f'No results found for "{query}" in the resume.'
        body = "\n\n".join(hit.render() for hit in hits)
        return f'Found {len(hits)} results for "{query}":\n\n{body}'
