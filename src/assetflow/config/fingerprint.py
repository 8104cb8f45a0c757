"""Rule set fingerprinting for change detection."""

from __future__ import annotations

import hashlib
import json

from assetflow.config.model import RuleSet


def rule_set_fingerprint(rule_set: RuleSet) -> str:
    """Return a stable hash of a validated rule set, independent of declaration order."""
    payload = {
        "options": {"confidence": rule_set.options.confidence},
        "rules": sorted(
            [
                key,
                rule.source,
                rule.target,
                rule.priority,
                rule.confidence,
                sorted(rule.exclude),
                rule.ttl,
            ]
            for key, rule in rule_set.rules.items()
        ),
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()
