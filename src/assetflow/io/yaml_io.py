"""YAML reading with ``SafeLoader`` semantics and duplicate-key rejection."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from yaml.constructor import ConstructorError

MERGE_TAG: str = "tag:yaml.org,2002:merge"


class DuplicateKeyError(ConstructorError):
    """Raised when a YAML mapping defines the same key twice."""


class UniqueKeySafeLoader(yaml.SafeLoader):
    """``SafeLoader`` that refuses mappings with a repeated key instead of keeping the last one."""

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[Any, Any]:
        if isinstance(node, yaml.MappingNode):
            seen: set[Any] = set()
            for key_node, _ in node.value:
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    # unhashable keys are reported by SafeLoader itself
                    continue
                if duplicate:
                    raise DuplicateKeyError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load_yaml_text(text: str) -> Any:
    """Parse YAML text; raises ``yaml.YAMLError`` (including :class:`DuplicateKeyError`)."""
    return yaml.load(text, Loader=UniqueKeySafeLoader)  # noqa: S506


def load_yaml_file(path: Path) -> Any:
    """Read a UTF-8 YAML file.

    Raises ``yaml.YAMLError`` for bad YAML and ``UnicodeDecodeError`` for bytes
    that are not UTF-8.
    """
    return load_yaml_text(path.read_text(encoding="utf-8"))
