from __future__ import annotations
import os
import json
import datetime
import re
from typing import Any, Dict, Mapping, Optional

# ------------------------------------------------------------------------------
# Debug flag (env overrideable) + runtime toggles
# ------------------------------------------------------------------------------
_DEBUG_ENABLED = os.getenv("BHOJPUR_DEBUG", "0").lower() not in ("0", "false", "no", "off", "")

def is_enabled() -> bool:
    return _DEBUG_ENABLED

def set_debug(enabled: bool) -> None:
    """Enable/disable debug printing at runtime."""
    global _DEBUG_ENABLED
    _DEBUG_ENABLED = bool(enabled)

# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
# Case-insensitive "Basic <b64>" / "Bearer <token>"
_AUTH_RE = re.compile(r"^(basic|bearer)\s+(.+)$", re.I)

# scheme://userinfo@host...
_USERINFO_RE = re.compile(r"^([a-z][a-z0-9+.\-]*://)([^@/]+)@", re.I)

SENSITIVE_HEADER_KEYS = {"authorization", "x-api-key"}

MAX_JSON_CHARS = int(os.getenv("BHOJPUR_DEBUG_MAX_JSON", "50000"))

def _ts() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

def mask_key(key: Optional[str]) -> str:
    """Mask an API key, keeping a short prefix (e.g. 'sk_...') as a hint."""
    if not key:
        return "(empty)"
    if len(key) <= 8:
        return "***"
    return f"{key[:3]}...{key[-2:]}"

def redact_url(url: str) -> str:
    """Replace the userinfo portion of a URL (where the API key travels) with a mask."""
    m = _USERINFO_RE.match(url or "")
    if not m:
        return url
    user = m.group(2).split(":", 1)[0]
    return f"{m.group(1)}{mask_key(user)}@{url[m.end():]}"

def redact_auth(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    m = _AUTH_RE.match(value.strip())
    if not m:
        return value
    return f"{m.group(1).title()} ***"

def scrub_headers(h: Mapping[str, str]) -> Dict[str, str]:
    """Return a sanitized copy of headers for safe logging."""
    out: Dict[str, str] = {}
    for k, v in (h or {}).items():
        lk = k.lower()
        if lk == "authorization":
            out[k] = redact_auth(v) or "***"
        elif lk in SENSITIVE_HEADER_KEYS:
            out[k] = "***"
        else:
            out[k] = v
    return out

# ------------------------------------------------------------------------------
# Printing helpers
# ------------------------------------------------------------------------------
def emit(*args: Any) -> None:
    """Print unconditionally on the SDK diagnostic channel."""
    print("[BhojpurSDK]", _ts(), *args, flush=True)

def dprint(*args: Any) -> None:
    if _DEBUG_ENABLED:
        emit(*args)

def format_json(data: Any) -> str:
    try:
        s = json.dumps(data, ensure_ascii=False, indent=2, default=str)
    except (TypeError, ValueError):
        s = repr(data)
    if len(s) > MAX_JSON_CHARS:
        s = s[:MAX_JSON_CHARS] + "... (truncated)"
    return s

def djson(label: str, data: Any) -> None:
    if _DEBUG_ENABLED:
        emit(f"{label}:", format_json(data))
