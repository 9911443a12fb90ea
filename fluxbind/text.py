import base64
import json
import re
from typing import Any

from . import config

_REGEX_SPECIAL = re.compile(r"[|\\{}()\[\]^$+*?.]")


def uppercase_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def escape_regex_string(text: str) -> str:
    """Escape regex metacharacters, and ``-`` as ``\\x2d``."""
    escaped = _REGEX_SPECIAL.sub(lambda m: "\\" + m.group(0), text)
    return escaped.replace("-", "\\x2d")


def normalize_data_attribute_name(name: str) -> str:
    if name.startswith(config.DATA_ATTRIBUTE_PREFIX):
        return name
    return f"{config.DATA_ATTRIBUTE_PREFIX}{name}"


def encode_data_json(value: Any) -> str:
    return base64.b64encode(json.dumps(value).encode("utf-8")).decode("utf-8")


def decode_data_json(encoded: str | None) -> Any:
    if not encoded:
        return None
    return json.loads(base64.b64decode(encoded).decode("utf-8"))
