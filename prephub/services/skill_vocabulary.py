from __future__ import annotations

from typing import Iterable


class VocabularyError(ValueError):
    pass


# Canonical casing is what gets displayed; lookups are case-insensitive.
KNOWN_SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "C", "Go", "Rust", "Ruby",
    "PHP", "Swift", "Kotlin", "Scala", "R", "MATLAB",
    # Frontend
    "React", "Angular", "Vue", "Vue.js", "Next.js", "Nuxt.js", "HTML", "CSS", "Sass", "Tailwind",
    "Bootstrap", "jQuery", "Redux", "GraphQL", "WebGL", "Three.js",
    # Backend
    "Node.js", "Express", "Django", "Flask", "FastAPI", "Spring", "Spring Boot", "Laravel",
    "Rails", "ASP.NET", ".NET", "Symfony",
    # Databases
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "SQLite", "Oracle", "SQL Server", "Firebase",
    "Supabase", "DynamoDB", "Cassandra", "Elasticsearch",
    # Cloud & DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD", "Jenkins", "GitHub Actions",
    "Terraform", "Ansible", "Linux", "Nginx", "Apache",
    # Mobile
    "React Native", "Flutter", "Android", "iOS", "Xamarin",
    # Data & AI
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Pandas", "NumPy",
    "Scikit-learn", "OpenCV", "NLP", "LLM", "Data Science", "Power BI", "Tableau",
    # Tools & others
    "Git", "GitHub", "GitLab", "Jira", "Figma", "REST", "REST API", "Microservices", "Agile",
    "Scrum", "OOP", "DSA", "Data Structures",
    # Testing
    "Jest", "Mocha", "Selenium", "Cypress", "JUnit", "pytest",
)


def validate_vocabulary(entries: Iterable[str]) -> tuple[str, ...]:
    """Return entries as a tuple, rejecting blanks and case-insensitive duplicates."""
    seen: dict[str, str] = {}
    out: list[str] = []
    for entry in entries:
        name = (entry or "").strip()
        if not name:
            raise VocabularyError("Vocabulary entries must be non-empty")
        key = name.lower()
        if key in seen:
            raise VocabularyError(f"Duplicate vocabulary entry {name!r} (already present as {seen[key]!r})")
        seen[key] = name
        out.append(name)
    return tuple(out)


def build_vocabulary(extra: Iterable[str] | None = None) -> tuple[str, ...]:
    """Built-in vocabulary followed by configured extras.

    Extras that collide with an earlier entry are skipped so configuration can
    never change the casing or position of a built-in skill.
    """

    base = validate_vocabulary(KNOWN_SKILLS)
    if not extra:
        return base

    seen = {name.lower() for name in base}
    merged = list(base)
    for entry in extra:
        name = (entry or "").strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        merged.append(name)
    return tuple(merged)
