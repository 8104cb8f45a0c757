"""Tests for YAML reading helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from assetflow.io import DuplicateKeyError, load_yaml_file, load_yaml_text


def test_load_yaml_text_reads_mapping() -> None:
    assert load_yaml_text("options:\n  confidence: 50\n") == {"options": {"confidence": 50}}


def test_load_yaml_text_keeps_empty_values_as_none() -> None:
    assert load_yaml_text("transformations:\n  IPAddress->RIRORG:\n") == {"transformations": {"IPAddress->RIRORG": None}}


@pytest.mark.parametrize(
    "text",
    [
        "confidence: 1\nconfidence: 2\n",
        "transformations:\n  FQDN->TLS:\n    priority: 1\n    priority: 2\n",
    ],
    ids=["top_level", "nested"],
)
def test_load_yaml_text_rejects_duplicate_keys(text: str) -> None:
    with pytest.raises(DuplicateKeyError, match="found duplicate key"):
        load_yaml_text(text)


def test_duplicate_key_error_is_yaml_error() -> None:
    with pytest.raises(yaml.YAMLError):
        load_yaml_text("a: 1\na: 2\n")


def test_load_yaml_text_allows_merge_keys() -> None:
    text = "\n".join(
        [
            "base: &base",
            "  priority: 1",
            "  confidence: 40",
            "rule:",
            "  <<: *base",
            "  confidence: 90",
        ]
    )

    assert load_yaml_text(text)["rule"] == {"priority": 1, "confidence": 90}


def test_load_yaml_text_does_not_construct_arbitrary_objects() -> None:
    with pytest.raises(yaml.YAMLError):
        load_yaml_text("!!python/object/apply:os.system ['true']\n")


def test_load_yaml_file_raises_on_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "transforms.yaml"
    path.write_bytes(b"\xff\xfe")

    with pytest.raises(UnicodeDecodeError):
        load_yaml_file(path)
