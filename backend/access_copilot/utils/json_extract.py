import json
from typing import Any

from access_copilot.errors import UpstreamParseError


def _reject_constant(name: str):
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def load_model_json(text: str) -> Any:
    """
    Parse LLM output as strict JSON.
    Absent output counts as an empty object; whitespace does not.
    Raises UpstreamParseError with the raw text otherwise.
    """
    if not text:
        text = "{}"

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise UpstreamParseError(raw=text) from e
