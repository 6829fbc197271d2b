"""
Placeholder substitution for response templates.

Templates name their tokens in braces, e.g. "{courseName} takes {duration} hours".
Every token is replaced; a token with no supplied value renders as "".
"""
import re
from typing import Mapping, Optional

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def render(template: str, values: Optional[Mapping[str, Optional[str]]] = None) -> str:
    values = values or {}

    def _sub(match: "re.Match") -> str:
        value = values.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_RE.sub(_sub, template)


def placeholders_in(template: str) -> set:
    """Token names a template expects."""
    return set(PLACEHOLDER_RE.findall(template))
