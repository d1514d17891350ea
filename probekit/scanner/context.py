"""Placeholder binding for request templates."""

import re
from dataclasses import dataclass, field
from typing import Dict

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^{}]*?)\s*\}\}")


@dataclass(frozen=True)
class ExecutionContext:
    """Per-target variables available to a request template.

    Created fresh for every (target, request) pair and never shared.
    Placeholders whose name has no value are left verbatim.
    """

    variables: Dict[str, str] = field(default_factory=dict)

    def interpolate(self, text: str) -> str:
        """Replace ``{{name}}`` and ``{{ name }}`` placeholders in text."""

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name in self.variables:
                return str(self.variables[name])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(replace, text)

    def unresolved(self, text: str) -> list:
        """Names of placeholders in text that have no value."""
        return [
            m.group(1) for m in PLACEHOLDER_PATTERN.finditer(text)
            if m.group(1) not in self.variables
        ]
