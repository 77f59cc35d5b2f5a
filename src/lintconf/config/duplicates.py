"""Per-rule configuration lookup across canonical identifiers and aliases."""

from __future__ import annotations

import copy
import logging
from typing import Any

from lintconf.exceptions import DuplicatedRuleConfigurationError
from lintconf.rules.catalog import RuleCatalog
from lintconf.types.common import RawConfig

logger = logging.getLogger(__name__)


def resolve_rule_configurations(raw: RawConfig, catalog: RuleCatalog) -> dict[str, Any]:
    """Map canonical rule identifiers to the config block written for them.

    Blocks are deep-copied so the result shares nothing with ``raw``.
    Rules with no block are left out. A rule configured under more than one
    of its names raises DuplicatedRuleConfigurationError, since picking one
    block over the other would hide a user mistake.
    """
    resolved: dict[str, Any] = {}
    for description in catalog.descriptions:
        present = [
            rule_name for rule_name in (description.identifier, *description.deprecated_aliases) if rule_name in raw
        ]
        if not present:
            continue
        if len(present) > 1:
            raise DuplicatedRuleConfigurationError(description.identifier, description.deprecated_aliases)
        if present[0] != description.identifier:
            logger.debug("Rule %s configured through alias %s", description.identifier, present[0])
        resolved[description.identifier] = copy.deepcopy(raw[present[0]])
    return resolved
