"""Skill vocabulary, extraction and fuzzy skill comparison"""
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..profiles.models import CandidateProfile

DEFAULT_SKILL_VOCABULARY = (
    "JavaScript", "TypeScript", "React", "Angular", "Vue", "Node.js", "Python",
    "Java", "C++", "C#", "Go", "Rust", "Ruby", "PHP", "Swift", "Kotlin",
    "SQL", "NoSQL", "MongoDB", "PostgreSQL", "MySQL", "Redis", "GraphQL",
    "REST", "AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD",
    "Git", "Linux", "Agile", "Scrum", "Machine Learning", "AI",
    "Data Science", "DevOps", "CSS", "HTML", "Sass", "Tailwind",
    "Next.js", "Express", "Django", "Flask", "Spring", "Rails",
    "TensorFlow", "PyTorch", "Figma", "Sketch", "UI/UX", "Product Management",
    "Project Management", "Leadership", "Communication", "Teamwork",
    "Problem Solving", "Critical Thinking", "Analytical", "Marketing",
    "Sales", "Finance", "Accounting", "HR", "Recruiting",
)

_STRIPPED_CHARS = re.compile(r"[.\-_]")
_WHITESPACE = re.compile(r"\s+")


def normalize_skill(skill: str) -> str:
    """Lower-case, drop '.', '-' and '_', collapse whitespace, trim"""
    text = _STRIPPED_CHARS.sub("", skill.lower())
    return _WHITESPACE.sub(" ", text).strip()


def skills_match(candidate_skill: str, job_skill: str) -> bool:
    """Equality or substring containment between normalized skills"""
    a = normalize_skill(candidate_skill)
    b = normalize_skill(job_skill)
    if a == b:
        return True
    return a in b or b in a


@dataclass(frozen=True)
class SkillVocabulary:
    """Curated set of skill terms searched for in profile text"""
    terms: Tuple[str, ...] = DEFAULT_SKILL_VOCABULARY
    _lowered: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_lowered", tuple(term.lower() for term in self.terms))

    @classmethod
    def from_terms(cls, terms: Iterable[str]) -> "SkillVocabulary":
        """Build a vocabulary, dropping blanks and repeated terms"""
        seen = set()
        unique: List[str] = []
        for term in terms:
            term = term.strip()
            if term and term.lower() not in seen:
                seen.add(term.lower())
                unique.append(term)
        return cls(terms=tuple(unique))

    def extract(self, text: str) -> List[str]:
        """Vocabulary terms contained in text, in vocabulary order"""
        lower = text.lower()
        if not lower:
            return []
        return [term for term, needle in zip(self.terms, self._lowered) if needle in lower]


DEFAULT_VOCABULARY = SkillVocabulary()


def extract_skills(candidate: CandidateProfile, vocabulary: SkillVocabulary = DEFAULT_VOCABULARY) -> List[str]:
    """Derive a candidate's skills from headline and summary"""
    text = " ".join(part for part in (candidate.headline, candidate.summary) if part)
    return vocabulary.extract(text)
