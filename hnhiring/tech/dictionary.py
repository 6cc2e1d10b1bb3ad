"""Technology keyword dictionary.

Each entry maps one canonical label ("React") to the aliases that identify
it in posting text ("react", "reactjs", "react.js"). A TechDictionary is
built once from a sequence of entries and is read-only afterwards: the
alias table and the compiled alias patterns are created in the
constructor, so concurrent readers need no locking.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from pydantic import BaseModel, Field, field_validator


class TechCategory(str, Enum):
    """Broad grouping of a technology label."""

    LANGUAGE = "language"
    FRONTEND = "frontend"
    BACKEND = "backend"
    MOBILE = "mobile"
    DATA = "data"
    CLOUD = "cloud"
    DEVOPS = "devops"
    DATABASE = "database"
    TESTING = "testing"
    AI = "ai"


class TechKeywordEntry(BaseModel):
    """One canonical technology label and its aliases."""

    label: str = Field(..., min_length=1, description="Canonical display label")
    category: TechCategory = Field(..., description="Technology category")
    aliases: List[str] = Field(
        default_factory=list,
        description="Case-insensitive aliases; the label itself when empty",
    )

    model_config = {"frozen": True}

    @field_validator("label")
    @classmethod
    def strip_label(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("label cannot be empty or whitespace-only")
        return stripped

    @field_validator("aliases")
    @classmethod
    def normalize_aliases(cls, v: List[str]) -> List[str]:
        """Lowercase and trim aliases, dropping empties and duplicates."""
        normalized: List[str] = []
        for alias in v:
            cleaned = alias.strip().lower()
            if cleaned and cleaned not in normalized:
                normalized.append(cleaned)
        return normalized

    def alias_list(self) -> List[str]:
        """Aliases to match, falling back to the lowercased label."""
        return list(self.aliases) or [self.label.lower()]


def _entry(label: str, category: str, *aliases: str) -> TechKeywordEntry:
    return TechKeywordEntry(label=label, category=category, aliases=list(aliases))


DEFAULT_TECH_KEYWORDS: Tuple[TechKeywordEntry, ...] = (
    _entry("TypeScript", "language", "typescript", "ts"),
    _entry("JavaScript", "language", "javascript", "js", "node.js", "nodejs", "node"),
    _entry("Python", "language", "python"),
    _entry("Go", "language", "go", "golang"),
    _entry("Rust", "language", "rust"),
    _entry("Java", "language", "java"),
    _entry("Kotlin", "language", "kotlin"),
    _entry("Swift", "mobile", "swift", "swiftui"),
    _entry("React", "frontend", "react", "reactjs", "react.js"),
    _entry("Next.js", "frontend", "next.js", "nextjs", "next js"),
    _entry("Vue", "frontend", "vue", "vue.js", "vuejs"),
    _entry("Angular", "frontend", "angular", "angular.js", "angularjs"),
    _entry("Svelte", "frontend", "svelte", "sveltekit"),
    _entry("React Native", "mobile", "react native"),
    _entry("Flutter", "mobile", "flutter", "dart"),
    _entry("AWS", "cloud", "aws", "amazon web services"),
    _entry("GCP", "cloud", "google cloud", "gcp", "google cloud platform"),
    _entry("Azure", "cloud", "azure", "microsoft azure"),
    _entry("PostgreSQL", "database", "postgresql", "postgres"),
    _entry("MySQL", "database", "mysql"),
    _entry("MongoDB", "database", "mongodb", "mongo"),
    _entry("Redis", "database", "redis"),
    _entry("GraphQL", "backend", "graphql"),
    _entry("REST", "backend", "rest", "restful"),
    _entry("Docker", "devops", "docker"),
    _entry("Kubernetes", "devops", "k8s", "kubernetes"),
    _entry("Terraform", "devops", "terraform"),
    _entry("CI/CD", "devops", "ci/cd", "continuous integration", "continuous deployment"),
    _entry("Linux", "devops", "linux"),
    _entry("Machine Learning", "ai", "machine learning", "ml"),
    _entry("AI", "ai", "ai", "artificial intelligence"),
    _entry("TensorFlow", "ai", "tensorflow"),
    _entry("PyTorch", "ai", "pytorch"),
    _entry("Elasticsearch", "data", "elasticsearch", "elastic search", "elastic"),
    _entry("Kafka", "data", "kafka", "apache kafka"),
    _entry("Snowflake", "data", "snowflake"),
    _entry("Airflow", "data", "airflow", "apache airflow"),
    _entry("C++", "language", "c++"),
    _entry("C#", "language", "c#", "csharp", "c-sharp"),
    _entry("PHP", "language", "php"),
    _entry("Laravel", "backend", "laravel"),
    _entry("Django", "backend", "django"),
    _entry("FastAPI", "backend", "fastapi", "fast api"),
    _entry("Ruby on Rails", "backend", "rails", "ruby on rails", "ror"),
    _entry("Ruby", "language", "ruby"),
    _entry("SQL", "data", "sql"),
    _entry("Testing Library", "testing", "testing library", "@testing-library"),
    _entry("Jest", "testing", "jest"),
)


def compile_alias_pattern(alias: str) -> re.Pattern:
    """Compile a case-insensitive pattern matching ``alias`` as a whole token.

    The alias may not touch a word character on either side. Unlike ``\\b``
    this also works for aliases that start or end with a symbol ("c++").
    """
    return re.compile(rf"(?<!\w){re.escape(alias.lower())}(?!\w)", re.IGNORECASE)


class TechDictionary:
    """Immutable alias table built from TechKeywordEntry records.

    When two entries share an alias, the later entry owns it.
    """

    def __init__(self, entries: Iterable[TechKeywordEntry]):
        self._entries: Tuple[TechKeywordEntry, ...] = tuple(entries)

        alias_lookup: Dict[str, str] = {}
        for entry in self._entries:
            for alias in entry.alias_list():
                alias_lookup[alias] = entry.label

        self._alias_lookup: Mapping[str, str] = MappingProxyType(alias_lookup)
        self._patterns: Mapping[str, re.Pattern] = MappingProxyType(
            {alias: compile_alias_pattern(alias) for alias in alias_lookup}
        )

    @property
    def entries(self) -> Tuple[TechKeywordEntry, ...]:
        return self._entries

    @property
    def alias_lookup(self) -> Mapping[str, str]:
        """Read-only alias -> label table."""
        return self._alias_lookup

    def iter_patterns(self) -> Iterable[Tuple[re.Pattern, str]]:
        """Yield (pattern, label) pairs for every alias."""
        for alias, label in self._alias_lookup.items():
            yield self._patterns[alias], label

    def extend(self, entries: Iterable[TechKeywordEntry]) -> "TechDictionary":
        """Return a new dictionary with extra entries appended."""
        return TechDictionary(self._entries + tuple(entries))

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_DICTIONARY = TechDictionary(DEFAULT_TECH_KEYWORDS)
