from __future__ import annotations

import json
import re
from typing import Any

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(text: str | None) -> dict[str, Any] | None:
    """Pull the outermost ``{...}`` span out of a model reply and parse it.

    Judges frequently wrap their JSON in prose or markdown fences; the span
    runs from the first ``{`` to the last ``}``. Returns ``None`` when there
    is no such span or it does not parse to an object.
    """
    if not isinstance(text, str):
        return None

    match = _JSON_OBJECT_RE.search(text)
    if match is None:
        return None

    try:
        parsed = json.loads(match.group(0))
    except (ValueError, RecursionError):
        return None

    return parsed if isinstance(parsed, dict) else None
