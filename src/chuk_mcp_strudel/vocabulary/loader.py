"""
Vocabulary loader - discovers and loads the known-function allow-list.

Vocabularies can come from:
1. Built-in library (shipped with package)
2. Project vocabulary (user's own YAML file, extends the library)
"""

from __future__ import annotations

import logging
from functools import cached_property, lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"
DEFAULT_VOCABULARY_FILE = "functions.yaml"


class FunctionVocabulary(BaseModel):
    """
    A categorized set of known pattern-language function names.

    Lookups are case-insensitive; names keep the spelling they are listed with.
    """

    schema_version: str = Field("vocabulary/v1", alias="schema", description="Schema version")
    name: str = Field(..., description="Vocabulary name")
    description: str = Field("", description="Human-readable description")
    categories: dict[str, list[str]] = Field(
        default_factory=dict, description="Function names grouped by category"
    )

    model_config = {"populate_by_name": True}

    @property
    def names(self) -> list[str]:
        """All function names, in file order, without duplicates."""
        seen: dict[str, None] = {}
        for entries in self.categories.values():
            for entry in entries:
                seen.setdefault(entry, None)
        return list(seen)

    @cached_property
    def folded_names(self) -> frozenset[str]:
        """Lowercased names, built once per vocabulary."""
        return frozenset(n.lower() for n in self.names)

    def is_known(self, name: str) -> bool:
        """Check a call name against the allow-list, ignoring case."""
        return name.lower() in self.folded_names

    def category_of(self, name: str) -> str | None:
        """Get the category a function belongs to, if any."""
        lowered = name.lower()
        for category, entries in self.categories.items():
            if any(e.lower() == lowered for e in entries):
                return category
        return None

    def merged_with(self, other: FunctionVocabulary) -> FunctionVocabulary:
        """
        Return a new vocabulary containing both sets of names.

        Categories present in both are concatenated; `other` never removes names.
        """
        categories = {k: list(v) for k, v in self.categories.items()}
        for category, entries in other.categories.items():
            existing = categories.setdefault(category, [])
            existing.extend(e for e in entries if e not in existing)
        return FunctionVocabulary(
            name=f"{self.name}+{other.name}",
            description=self.description,
            categories=categories,
        )


class VocabularyLoader:
    """
    Loads vocabulary definitions from YAML files.

    The library vocabulary is always loaded; a project file, when present,
    extends it.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_file: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Directory holding the built-in vocabulary
            project_file: Optional YAML file with extra function names
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_file = project_file
        self._cache: FunctionVocabulary | None = None

    def load(self) -> FunctionVocabulary:
        """
        Load the effective vocabulary.

        Returns:
            Library vocabulary, extended by the project file if one exists

        Raises:
            FileNotFoundError: If the library vocabulary is missing
        """
        if self._cache is not None:
            return self._cache

        library_file = self.library_path / DEFAULT_VOCABULARY_FILE
        vocabulary = self._load_file(library_file)

        if self.project_file and self.project_file.exists():
            vocabulary = vocabulary.merged_with(self._load_file(self.project_file))
            logger.debug("Extended vocabulary from %s", self.project_file)

        self._cache = vocabulary
        return vocabulary

    def _load_file(self, path: Path) -> FunctionVocabulary:
        """Load a single vocabulary file."""
        with open(path) as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        if "name" not in data:
            data["name"] = path.stem
        return FunctionVocabulary.model_validate(data)


@lru_cache(maxsize=1)
def default_vocabulary() -> FunctionVocabulary:
    """Get the built-in vocabulary (loaded once per process)."""
    return VocabularyLoader().load()
