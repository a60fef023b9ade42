"""Text layout for alert payloads.

Every alert is rendered into a single Markdown string::

    **<title>**

    message:```

    <message>```
    data:```

    <json>```

The ``data`` section is omitted when there is no extra data.
"""

import json
from collections.abc import Mapping
from string import Template
from typing import Any, Optional

#: Layout shared by all alerts; ``$data`` is empty or a ``data:`` block.
DEF_TEMPLATE = Template("**$title**\n\nmessage:```\n\n$message```\n$data\n")

_DATA_TEMPLATE = Template("data:```\n\n$json```\n")


def _to_json(value: Any, indent: Optional[int] = None) -> str:
    """Serialize *value*; compact unless *indent* is given."""
    separators = None if indent else (",", ":")
    return json.dumps(value, indent=indent, separators=separators, ensure_ascii=False, default=str)


def render_data_block(data: Optional[Mapping[str, Any]]) -> str:
    """Return the ``data:`` section for *data*, or ``""`` when empty."""
    if not data:
        return ""
    return _DATA_TEMPLATE.substitute(json=_to_json(dict(data)))


def render_content(title: str, message: str, data: Optional[Mapping[str, Any]] = None) -> str:
    """Render the full alert text.

    Substitution is single-pass, so a ``$message`` inside *title* is
    left as literal text.

    Args:
        title: Alert headline.
        message: Alert body.
        data: Optional extra fields.

    Returns:
        The Markdown string posted to the platform.
    """
    return DEF_TEMPLATE.substitute(
        title=title,
        message=message,
        data=render_data_block(data),
    )


def format_embed_fields(data: Any) -> list[dict[str, str]]:
    """Convert *data* into ``{"name", "value"}`` embed-style fields.

    Not used by the send path.  Nested mappings and lists become
    fenced, indented JSON; everything else is ``str(value)``.

    Returns:
        One field per key, or ``[]`` for empty or non-mapping input.
    """
    if not data or not isinstance(data, Mapping):
        return []

    fields = []
    for key, value in data.items():
        if isinstance(value, (Mapping, list, tuple)):
            rendered = "```json\n" + _to_json(value, indent=2) + "\n```"
        else:
            rendered = str(value)
        fields.append({"name": str(key), "value": rendered})
    return fields
