"""
Prefix Table Module

Ordered mapping from image tag prefix to release group. Rules are evaluated
top to bottom and the first match wins; a catch-all default group is used
when nothing matches. Construction refuses orderings where a broader prefix
would hide a more specific one, so first match is also longest match.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from .exceptions import PrefixTableError
from .models import ReleaseGroup


@dataclass(frozen=True)
class PrefixRule:
    """Maps tags whose prefix starts with ``pattern`` to ``group``."""
    pattern: str
    group: ReleaseGroup

    def matches(self, prefix: str) -> bool:
        return prefix.startswith(self.pattern)


@dataclass(frozen=True)
class PrefixTable:
    """Ordered prefix rules with a default group."""
    rules: Tuple[PrefixRule, ...]
    default_group: ReleaseGroup

    def __post_init__(self):
        rules = tuple(self.rules)
        if not self.default_group:
            raise PrefixTableError("Prefix table requires a default group")

        for index, rule in enumerate(rules):
            if not rule.pattern:
                raise PrefixTableError(f"Empty prefix pattern for group '{rule.group}'")
            if not rule.group:
                raise PrefixTableError(f"Empty release group for prefix '{rule.pattern}'")
            for earlier in rules[:index]:
                if earlier.pattern == rule.pattern:
                    raise PrefixTableError(f"Duplicate prefix pattern '{rule.pattern}'")
                if earlier.matches(rule.pattern):
                    raise PrefixTableError(
                        f"Prefix '{rule.pattern}' is shadowed by the earlier prefix "
                        f"'{earlier.pattern}'; list more specific prefixes first"
                    )

        # frozen dataclass: normalise lists passed by callers into a tuple
        object.__setattr__(self, "rules", rules)

    def resolve_group(self, prefix: str) -> ReleaseGroup:
        """
        Resolve a tag prefix to its release group.

        Never fails: unmatched or non-string input resolves to the default group.

        Args:
            prefix: Informative prefix of an image tag (e.g. 'accudo-indexer-grpc')

        Returns:
            Release group name
        """
        if not isinstance(prefix, str) or not prefix:
            return self.default_group

        for rule in self.rules:
            if rule.matches(prefix):
                return rule.group

        return self.default_group


def build_prefix_table(rules: Iterable[Tuple[str, ReleaseGroup]], default_group: ReleaseGroup) -> PrefixTable:
    """Build a table from ``(pattern, group)`` pairs in precedence order."""
    return PrefixTable(
        rules=tuple(PrefixRule(pattern, group) for pattern, group in rules),
        default_group=default_group,
    )


def load_prefix_table(data: Dict[str, Any]) -> PrefixTable:
    """
    Build a prefix table from parsed YAML data.

    Expected shape:

        default: accudo-node
        rules:
          - prefix: accudo-indexer-grpc
            group: accudo-indexer-grpc
          - prefix: accudo-node
            group: accudo-node

    Args:
        data: Mapping loaded from a prefix table file

    Returns:
        PrefixTable

    Raises:
        PrefixTableError: If the data does not have the expected shape
    """
    if not isinstance(data, dict):
        raise PrefixTableError("Prefix table must be a mapping with 'default' and 'rules' keys")

    default_group = data.get("default")
    if not isinstance(default_group, str) or not default_group:
        raise PrefixTableError("Prefix table 'default' must be a non-empty string")

    raw_rules = data.get("rules") or []
    if not isinstance(raw_rules, list):
        raise PrefixTableError("Prefix table 'rules' must be a list")

    rules = []
    for i, entry in enumerate(raw_rules, 1):
        if not isinstance(entry, dict) or "prefix" not in entry or "group" not in entry:
            raise PrefixTableError(f"Prefix table rule {i} must have 'prefix' and 'group' keys")
        rules.append((str(entry["prefix"]), str(entry["group"])))

    return build_prefix_table(rules, default_group)
