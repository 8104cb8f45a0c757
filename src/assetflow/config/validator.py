"""Collect-all checks for transformation config files.

Unlike :func:`validate_rules`, which stops at the first problem, this module
reports every problem it can find so an operator can fix a file in one pass.
It never raises for a bad config.
"""

from __future__ import annotations

import difflib
from collections import defaultdict
from collections.abc import Container
from pathlib import Path
from typing import Any

import yaml

from assetflow.config.keys import split_key
from assetflow.config.parser import int_field_problem, is_string_list
from assetflow.constants.transform import NONE_TARGET, RESERVED_TARGETS
from assetflow.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_OPTION_KEYS,
    ALLOWED_RULE_KEYS,
    TRF001,
    TRF002,
    TRF003,
    TRF004,
    TRF005,
    TRF006,
    TRF007,
    TRF008,
    TRF009,
    TRF010,
    TRF011,
)
from assetflow.exceptions import InvalidKeyFormatError
from assetflow.exceptions.validation import ValidationError, sort_errors
from assetflow.io import DuplicateKeyError, load_yaml_file
from assetflow.vocabulary import DEFAULT_VOCABULARY


def validate_config_file(
    path: Path,
    *,
    vocabulary: Container[str] = DEFAULT_VOCABULARY,
) -> list[ValidationError]:
    """Validate a transformation config file and return all validation errors."""
    path = path.resolve()
    path_str = str(path)

    if not path.is_file():
        return [ValidationError(code=TRF001, path=path_str, field="", message=f"config file not found: {path}")]

    try:
        raw = load_yaml_file(path)
    except DuplicateKeyError as exc:
        return [
            ValidationError(
                code=TRF011,
                path=path_str,
                field="",
                message=f"{exc.problem} on line {exc.problem_mark.line + 1}",
                hint="each mapping key may appear only once",
            )
        ]
    except yaml.YAMLError as exc:
        return [ValidationError(code=TRF002, path=path_str, field="", message=f"invalid YAML: {exc}")]
    except UnicodeDecodeError as exc:
        return [
            ValidationError(code=TRF002, path=path_str, field="", message=f"file is not valid UTF-8: {exc.reason}")
        ]

    return validate_config_document(raw, path_str, vocabulary=vocabulary)


def validate_config_document(
    raw: Any,
    path_str: str,
    *,
    vocabulary: Container[str] = DEFAULT_VOCABULARY,
) -> list[ValidationError]:
    """Validate an already-parsed config document and return sorted errors."""
    errors: list[ValidationError] = []
    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=TRF003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=TRF004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    _validate_options_block(raw, path_str, errors)
    _validate_transformations_block(raw, path_str, vocabulary, errors)
    return sort_errors(errors)


def _validate_options_block(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``options`` nested mapping."""
    options = raw.get("options")
    if options is None:
        return
    if not isinstance(options, dict):
        errors.append(
            ValidationError(code=TRF010, path=path_str, field="options", message="`options` must be a mapping")
        )
        return

    for key in sorted(str(k) for k in options):
        if key not in ALLOWED_OPTION_KEYS:
            errors.append(
                ValidationError(
                    code=TRF004,
                    path=path_str,
                    field=f"options.{key}",
                    message=f"unknown key `{key}` in `options`",
                    hint=_suggest_key(key, ALLOWED_OPTION_KEYS),
                )
            )

    _validate_int_field(options, "options", "confidence", path_str, errors)


def _validate_transformations_block(
    raw: dict[str, Any],
    path_str: str,
    vocabulary: Container[str],
    errors: list[ValidationError],
) -> None:
    """Validate every rule in the ``transformations`` mapping."""
    transformations = raw.get("transformations")
    if transformations is None:
        return
    if not isinstance(transformations, dict):
        errors.append(
            ValidationError(
                code=TRF010,
                path=path_str,
                field="transformations",
                message="`transformations` must be a mapping",
            )
        )
        return

    by_source: dict[str, list[tuple[str, str]]] = defaultdict(list)
    for key, body in transformations.items():
        label = f"transformations.{key}"
        try:
            source, target = split_key(key)
        except InvalidKeyFormatError as exc:
            errors.append(ValidationError(code=TRF007, path=path_str, field=label, message=str(exc)))
        else:
            if target not in RESERVED_TARGETS and target not in vocabulary:
                errors.append(
                    ValidationError(
                        code=TRF008,
                        path=path_str,
                        field=label,
                        message=f"target `{target}` is not a known entity type",
                        hint=f"expected a known entity type or one of: {', '.join(sorted(RESERVED_TARGETS))}",
                    )
                )
            if source not in vocabulary:
                errors.append(
                    ValidationError(
                        code=TRF008,
                        path=path_str,
                        field=label,
                        message=f"source `{source}` is not a known entity type",
                    )
                )
            by_source[source].append((str(key), target))

        _validate_rule_body(body, label, path_str, errors)

    for source, members in sorted(by_source.items()):
        if len(members) > 1 and any(target == NONE_TARGET for _, target in members):
            errors.append(
                ValidationError(
                    code=TRF009,
                    path=path_str,
                    field=f"transformations.{source}",
                    message=f"`none` transformation for `{source}` conflicts with other transformations",
                    hint=f"remove the `none` rule or: {', '.join(key for key, _ in members)}",
                )
            )


def _validate_rule_body(body: Any, label: str, path_str: str, errors: list[ValidationError]) -> None:
    if body is None:
        return
    if not isinstance(body, dict):
        errors.append(
            ValidationError(code=TRF010, path=path_str, field=label, message=f"`{label}` must be a mapping")
        )
        return

    for key in sorted(str(k) for k in body):
        if key not in ALLOWED_RULE_KEYS:
            errors.append(
                ValidationError(
                    code=TRF004,
                    path=path_str,
                    field=f"{label}.{key}",
                    message=f"unknown key `{key}` in `{label}`",
                    hint=_suggest_key(key, ALLOWED_RULE_KEYS),
                )
            )

    for field in ("priority", "confidence", "ttl"):
        _validate_int_field(body, label, field, path_str, errors)

    exclude = body.get("exclude")
    if exclude is not None and not is_string_list(exclude):
        errors.append(
            ValidationError(
                code=TRF005,
                path=path_str,
                field=f"{label}.exclude",
                message=f"invalid type for `{label}.exclude`",
                hint="expected a list of strings",
            )
        )
    elif exclude is not None and any(not name.strip() for name in exclude):
        errors.append(
            ValidationError(
                code=TRF005,
                path=path_str,
                field=f"{label}.exclude",
                message=f"blank entry in `{label}.exclude`",
                hint="remove empty entity type names",
            )
        )


def _validate_int_field(
    block: dict[str, Any],
    label: str,
    field: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    value = block.get(field)
    if value is None:
        return
    problem = int_field_problem(field, value)
    if problem is None:
        return
    kind, message = problem
    errors.append(
        ValidationError(
            code=TRF005 if kind == "type" else TRF006,
            path=path_str,
            field=f"{label}.{field}",
            message=message,
        )
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
