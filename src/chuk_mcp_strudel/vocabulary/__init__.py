"""
Vocabulary system - the allow-list of known function names.

The list is data, not code: extend it by editing the YAML library
or by pointing the loader at a project file.
"""

from chuk_mcp_strudel.vocabulary.loader import (
    FunctionVocabulary,
    VocabularyLoader,
    default_vocabulary,
)

__all__ = [
    "FunctionVocabulary",
    "VocabularyLoader",
    "default_vocabulary",
]
