"""Tests for loading transformation configs from YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetflow.config import load_rule_set, load_rule_set_text
from assetflow.exceptions import (
    ConfigError,
    ConflictingNoneTransformationError,
    InvalidKeyFormatError,
    NonCompliantTypeError,
)


def test_load_rule_set_valid_config(configs_root: Path) -> None:
    rule_set = load_rule_set(configs_root / "valid.yaml")

    assert len(rule_set) == 7
    assert rule_set.options.confidence == 50
    assert rule_set.rules["FQDN->DomainRecord"].confidence == 50
    assert rule_set.rules["FQDN->IPAddress"].confidence == 80
    assert rule_set.rules["FQDN->ALL"].exclude == frozenset({"rirorg", "fqdn"})


@pytest.mark.parametrize(
    ("filename", "error_type"),
    [
        ("conflicting_none_after.yaml", ConflictingNoneTransformationError),
        ("conflicting_none_before.yaml", ConflictingNoneTransformationError),
        ("invalid_key.yaml", InvalidKeyFormatError),
        ("unknown_target.yaml", NonCompliantTypeError),
        ("unknown_source.yaml", NonCompliantTypeError),
    ],
    ids=["none_after", "none_before", "invalid_key", "unknown_target", "unknown_source"],
)
def test_load_rule_set_rejects_invalid_configs(
    configs_root: Path, filename: str, error_type: type[ConfigError]
) -> None:
    with pytest.raises(error_type):
        load_rule_set(configs_root / filename)


def test_load_rule_set_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_rule_set(tmp_path / "transforms.yaml")


def test_load_rule_set_invalid_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "transforms.yaml"
    config_path.write_text("transformations: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_rule_set(config_path)


def test_load_rule_set_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "transforms.yaml"
    config_path.write_text("- FQDN->IPAddress\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="YAML mapping"):
        load_rule_set(config_path)


def test_load_rule_set_empty_file_yields_empty_rule_set(tmp_path: Path) -> None:
    config_path = tmp_path / "transforms.yaml"
    config_path.write_text("", encoding="utf-8")

    rule_set = load_rule_set(config_path)

    assert len(rule_set) == 0


def test_load_rule_set_text_reads_inline_yaml() -> None:
    rule_set = load_rule_set_text(
        "\n".join(
            [
                "options:",
                "  confidence: 30",
                "transformations:",
                "  IPAddress->Netblock:",
                "    ttl: 60",
            ]
        )
    )

    rule = rule_set.rules["IPAddress->Netblock"]
    assert rule.confidence == 30
    assert rule.ttl == 60


def test_load_rule_set_text_invalid_yaml() -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_rule_set_text("options: {confidence: [")


def test_load_rule_set_rejects_non_utf8_file(tmp_path: Path) -> None:
    config_path = tmp_path / "transforms.yaml"
    config_path.write_bytes(b"transformations:\n  FQDN->IPAddress: \xff\n")

    with pytest.raises(ConfigError, match="not valid UTF-8"):
        load_rule_set(config_path)


def test_load_rule_set_rejects_duplicate_keys(configs_root: Path) -> None:
    with pytest.raises(ConfigError, match="duplicate key 'FQDN->IPAddress'"):
        load_rule_set(configs_root / "duplicate_key.yaml")


def test_load_rule_set_text_rejects_duplicate_keys() -> None:
    text = "\n".join(
        [
            "transformations:",
            "  FQDN->IPAddress:",
            "    confidence: 80",
            "  FQDN->IPAddress:",
            "    confidence: 10",
        ]
    )

    with pytest.raises(ConfigError, match="duplicate key"):
        load_rule_set_text(text)
