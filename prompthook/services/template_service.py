import json
import re
from typing import Any, List, Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}", re.ASCII)


def format_value(value: Any) -> str:
    """Render a JSON value the way it reads in the payload it came from.

    ``true``/``false``/``null`` stay lowercase, integral floats drop the
    ``.0``, arrays join their items with commas and objects render as
    compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else format_value(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)


def render_template(template: str, data: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute ``{{key}}`` placeholders with ``format_value(data[key])``.

    Placeholders naming a key absent from ``data`` are left as-is. Substituted
    values are never re-scanned.
    """
    if not data:
        return template

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key in data:
            return format_value(data[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def find_placeholders(template: str) -> List[str]:
    """Placeholder names in order of first appearance."""
    seen: List[str] = []
    for name in PLACEHOLDER_PATTERN.findall(template):
        if name not in seen:
            seen.append(name)
    return seen
