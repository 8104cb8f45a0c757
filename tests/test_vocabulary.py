"""Tests for the entity vocabulary."""

from __future__ import annotations

from assetflow.constants.vocabulary import DEFAULT_ENTITY_TYPES
from assetflow.vocabulary import DEFAULT_VOCABULARY, EntityVocabulary


def test_default_vocabulary_is_case_insensitive() -> None:
    assert "FQDN" in DEFAULT_VOCABULARY
    assert "fqdn" in DEFAULT_VOCABULARY
    assert "IPAddress" in DEFAULT_VOCABULARY
    assert "rirorg" in DEFAULT_VOCABULARY


def test_default_vocabulary_covers_builtin_types() -> None:
    assert len(DEFAULT_VOCABULARY) == len(DEFAULT_ENTITY_TYPES)


def test_reserved_tokens_are_not_entity_types() -> None:
    assert "all" not in DEFAULT_VOCABULARY
    assert "none" not in DEFAULT_VOCABULARY


def test_custom_vocabulary_ignores_blank_names() -> None:
    vocabulary = EntityVocabulary(["Host", " ", "Port"])

    assert list(vocabulary) == ["host", "port"]
    assert 42 not in vocabulary
    assert "" not in vocabulary
