from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any

from dotenv import load_dotenv

from .debug import mask_key, emit
from .errors import SubscriptionConfigError

DEFAULT_BASE_URL = "https://api.bhojpur.net"
DEFAULT_TIMEOUT = 30.0


# ----------------------------- helpers -----------------------------

def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    v = value.strip().lower()
    return v not in ("0", "false", "no", "off", "")


def _parse_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


def _normalize_base_url(url: Optional[str]) -> str:
    url = (url or "").strip()
    if not url:
        return DEFAULT_BASE_URL
    return url.rstrip("/")


def _dprint(enabled: bool, *args: Any) -> None:
    if enabled:
        emit("[Config]", *args)


# ----------------------------- config -----------------------------

@dataclass
class SubscriptionConfig:
    """
    Configuration with precedence:
      explicit kwargs > environment (.env via from_env()) > defaults

    Build it once at startup and hand it to a SubscriptionClient; the client
    treats it as read-only afterwards. Changing a config that is already in
    use by concurrent requests is not supported.
    """

    # Credential (sent as URL userinfo / HTTP Basic username)
    api_key: Optional[str] = None

    # Routing / network
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    # Diagnostics: print request/response traffic
    debug: Optional[bool] = None

    # arg | env | env/default, per field; shown in the debug trace
    _source: Dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        env = os.environ

        if self.api_key is None or self.api_key == "":
            self.api_key = env.get("BHOJPUR_API_KEY", "")
            self._source["api_key"] = "env"
        else:
            self._source["api_key"] = "arg"

        if self.base_url is None or self.base_url == "":
            self.base_url = _normalize_base_url(env.get("BHOJPUR_BASE_URL"))
            self._source["base_url"] = "env/default"
        else:
            self.base_url = _normalize_base_url(self.base_url)
            self._source["base_url"] = "arg"

        if self.timeout is None:
            self.timeout = _parse_float(env.get("BHOJPUR_TIMEOUT"), DEFAULT_TIMEOUT)
            self._source["timeout"] = "env/default"
        else:
            self.timeout = float(self.timeout)
            self._source["timeout"] = "arg"

        if self.debug is None:
            self.debug = _parse_bool(env.get("BHOJPUR_DEBUG"), False)
            self._source["debug"] = "env/default"
        else:
            self.debug = bool(self.debug)
            self._source["debug"] = "arg"

        _dprint(bool(self.debug), "Loaded config:", {**self.masked(), "source": self._source})

    # -------- validation & utils --------
    def validate(self) -> "SubscriptionConfig":
        """Ensure an API key is present before any request is made."""
        if not self.api_key:
            _dprint(bool(self.debug), "Validation failed: api_key missing")
            raise SubscriptionConfigError("BHOJPUR_API_KEY is required for API calls.")
        return self

    def masked(self) -> dict:
        """Config as a dict with the key masked, safe to print."""
        return {
            "api_key": mask_key(self.api_key),
            "base_url": self.base_url,
            "timeout": self.timeout,
            "debug": self.debug,
        }

    def copy_with(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
    ) -> "SubscriptionConfig":
        """Create a modified copy (handy in tests, e.g. pointing at a local server)."""
        return replace(
            self,
            api_key=self.api_key if api_key is None else api_key,
            base_url=_normalize_base_url(base_url if base_url is not None else self.base_url),
            timeout=self.timeout if timeout is None else float(timeout),
            debug=self.debug if debug is None else bool(debug),
        )

    # -------- alt constructors --------
    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "SubscriptionConfig":
        """Build config from the environment, loading a .env file first if present."""
        load_dotenv(dotenv_path)
        return cls().validate()


__all__ = ["SubscriptionConfig", "DEFAULT_BASE_URL"]
