"""
Tests for the function vocabulary.

Tests cover:
- Built-in library loading
- Case-insensitive lookup and categories
- Project file merging
"""

from pathlib import Path

import pytest
import yaml

from chuk_mcp_strudel.vocabulary import FunctionVocabulary, VocabularyLoader, default_vocabulary


class TestLibraryVocabulary:
    """Tests for the built-in vocabulary file."""

    def test_loads(self) -> None:
        """The shipped library loads with its schema and name."""
        vocab = default_vocabulary()
        assert vocab.schema_version == "vocabulary/v1"
        assert vocab.name == "strudel-core"

    @pytest.mark.parametrize(
        "name", ["s", "note", "stack", "setcpm", "fast", "every", "room", "gain", "lpf"]
    )
    def test_core_functions_known(self, name: str) -> None:
        """Everyday pattern functions are in the library."""
        assert default_vocabulary().is_known(name)

    def test_case_insensitive(self) -> None:
        """Lookups ignore case."""
        vocab = default_vocabulary()
        assert vocab.is_known("SetCPM")
        assert vocab.is_known("DEGRADEBY")

    def test_unknown(self) -> None:
        """Names outside the library are not known."""
        assert not default_vocabulary().is_known("wobble")

    def test_category_of(self) -> None:
        """Functions report their category."""
        vocab = default_vocabulary()
        assert vocab.category_of("room") == "effects"
        assert vocab.category_of("Stack") == "structure"
        assert vocab.category_of("wobble") is None

    def test_names_unique(self) -> None:
        """Each name is listed once."""
        names = default_vocabulary().names
        assert len(names) == len(set(names))

    def test_cached(self) -> None:
        """The default vocabulary is loaded once."""
        assert default_vocabulary() is default_vocabulary()

    def test_all_names_are_strings(self) -> None:
        """YAML keywords such as off or n stay function names, not booleans."""
        vocab = default_vocabulary()
        assert all(isinstance(n, str) for n in vocab.names)
        assert vocab.is_known("off")
        assert vocab.is_known("n")
        assert vocab.category_of("off") == "time"

    def test_folded_names_built_once(self) -> None:
        """The lowercased lookup set is reused across calls."""
        vocab = FunctionVocabulary(name="t", categories={"fx": ["Room", "lpf"]})
        assert vocab.folded_names is vocab.folded_names
        assert vocab.folded_names == frozenset({"room", "lpf"})


class TestVocabularyLoader:
    """Tests for VocabularyLoader."""

    def test_project_file_extends_library(self, temp_dir: Path) -> None:
        """Project names are added; library names stay."""
        project = temp_dir / "my-functions.yaml"
        project.write_text(
            yaml.safe_dump({"categories": {"effects": ["wobble"], "custom": ["glitch"]}})
        )

        vocab = VocabularyLoader(project_file=project).load()
        assert vocab.is_known("wobble")
        assert vocab.is_known("glitch")
        assert vocab.is_known("room")
        assert vocab.category_of("glitch") == "custom"
        assert vocab.name == "strudel-core+my-functions"

    def test_missing_project_file_ignored(self, temp_dir: Path) -> None:
        """A project file that does not exist is skipped."""
        vocab = VocabularyLoader(project_file=temp_dir / "absent.yaml").load()
        assert vocab.name == "strudel-core"

    def test_custom_library_path(self, temp_dir: Path) -> None:
        """The library directory can be replaced."""
        (temp_dir / "functions.yaml").write_text(
            "schema: vocabulary/v1\nname: tiny\ncategories:\n  sources: [s]\n"
        )
        vocab = VocabularyLoader(library_path=temp_dir).load()
        assert vocab.names == ["s"]

    def test_missing_library_raises(self, temp_dir: Path) -> None:
        """A missing library file is an error."""
        with pytest.raises(FileNotFoundError):
            VocabularyLoader(library_path=temp_dir).load()

    def test_load_is_cached(self) -> None:
        """A loader returns the same vocabulary on repeated loads."""
        loader = VocabularyLoader()
        assert loader.load() is loader.load()


class TestMerging:
    """Tests for FunctionVocabulary.merged_with."""

    def test_merge_does_not_duplicate(self) -> None:
        """Names present in both are kept once."""
        base = FunctionVocabulary(name="a", categories={"fx": ["room", "delay"]})
        extra = FunctionVocabulary(name="b", categories={"fx": ["delay", "crush"]})
        merged = base.merged_with(extra)
        assert merged.categories["fx"] == ["room", "delay", "crush"]
        assert base.categories["fx"] == ["room", "delay"]
