from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import SubscriptionConfig
from .debug import emit, format_json, is_enabled, mask_key, redact_url, scrub_headers
from .errors import (
    SubscriptionDecodeError,
    SubscriptionTransportError,
    decode_error_response,
)

try:
    # __version__ is defined in bhojpur_subscription/__init__.py
    from . import __version__ as SDK_VERSION  # type: ignore
except ImportError:
    SDK_VERSION = "0.0.0"


# -------------------- constants --------------------

# The API applies version-specific behaviour based on this header.
API_VERSION = "2018-03-26"
VERSION_HEADER = "Bhojpur-Version"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

T = TypeVar("T")

# Ordered multimap: [("card[number]", "4242..."), ...] or {"count": "10"}
ParamSet = Union[
    Sequence[Tuple[str, str]],
    Mapping[str, Union[str, Sequence[str]]],
]


@dataclass(frozen=True)
class RawResponse:
    """Fully-read HTTP response, before any JSON decoding."""
    content: bytes
    status_code: int
    headers: httpx.Headers

    @property
    def ok(self) -> bool:
        return self.status_code == 200


def encode_params(params: Optional[ParamSet]) -> str:
    """Form-encode a parameter set, preserving order and repeated keys."""
    if not params:
        return ""
    return str(httpx.QueryParams(params))


def _describe_error(err: Mapping[str, Any]) -> str:
    """`field.path=<raw input>: message` for one pydantic error entry."""
    where = ".".join(str(p) for p in err.get("loc", ())) or "<body>"
    raw = repr(err.get("input"))
    if len(raw) > 80:
        raw = raw[:77] + "..."
    return f"{where}={raw}: {err['msg']}"


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode(content: bytes, target: Type[T]) -> T:
    """
    Decode a JSON body into `target` (a pydantic model, or any type pydantic
    understands such as List[Model]). Nullable scalar fields inside the target
    accept null through their own validators.
    """
    try:
        return _adapter(target).validate_json(content)
    except ValidationError as e:
        name = getattr(target, "__name__", repr(target))
        raise SubscriptionDecodeError(
            f"response does not match {name}: {e.error_count()} error(s); first: {_describe_error(e.errors()[0])}",
            body=content,
            target=name,
        ) from e


class SubscriptionClient:
    """
    Sync client for the Bhojpur Subscription REST API.

    - Authenticates by putting the API key in the URL userinfo (HTTP Basic,
      key as username, blank password).
    - Sends `Bhojpur-Version` on every request.
    - GET parameters go in the query string; every other verb sends them as a
      form-encoded body.
    - No retries: network errors raise SubscriptionTransportError, non-200
      responses raise SubscriptionAPIError.
    - Diagnostics (`config.debug`, or the process-wide toggle in `debug`)
      cover transport traffic, decoded API errors and the resource helpers,
      which trace through `trace()`.

    One instance may be shared between threads; connections are pooled by httpx.
    """

    def __init__(
        self,
        config: SubscriptionConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config.validate()
        self._client = httpx.Client(
            timeout=self.config.timeout,
            transport=transport,
            headers={
                "User-Agent": f"bhojpur-subscription-python/{SDK_VERSION}",
                "Accept": "application/json",
                VERSION_HEADER: API_VERSION,
            },
        )
        self._trace(
            "Client init",
            format_json({
                "base_url": self.config.base_url,
                "api_key": mask_key(self.config.api_key),
                "timeout": self.config.timeout,
                "api_version": API_VERSION,
                "sdk_version": SDK_VERSION,
            }),
        )

    # ------------ context manager support ------------
    def __enter__(self) -> "SubscriptionClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------ internal helpers ------------
    @property
    def debug(self) -> bool:
        return bool(self.config.debug) or is_enabled()

    def _trace(self, *args: Any) -> None:
        if self.debug:
            emit(*args)

    def trace(self, label: str, data: Any = None) -> None:
        """Print `label` and `data` (as JSON) when this client is in debug mode."""
        if data is None:
            self._trace(label)
        else:
            self._trace(f"{label}:", format_json(data))

    def _url(self, path: str) -> httpx.URL:
        if not path.startswith("/"):
            path = "/" + path
        return httpx.URL(self.config.base_url).copy_with(
            path=path,
            username=self.config.api_key,
            password="",
        )

    # ------------ transport ------------
    def execute(
        self,
        method: str,
        path: str,
        params: Optional[ParamSet] = None,
        *,
        timeout: Optional[float] = None,
    ) -> RawResponse:
        """
        Send one request and read the whole response.

        `timeout` (seconds) overrides the configured timeout for this call.
        Raises SubscriptionTransportError when no response was received; the
        status code is not inspected here.
        """
        method = method.upper()
        url = self._url(path)
        encoded = encode_params(params)

        kwargs: dict = {}
        if method == "GET":
            if encoded:
                kwargs["params"] = httpx.QueryParams(encoded)
        elif params is not None:
            kwargs["content"] = encoded.encode("ascii")
            kwargs["headers"] = {"Content-Type": FORM_CONTENT_TYPE}
        if timeout is not None:
            kwargs["timeout"] = timeout

        if self.debug:
            shown = redact_url(str(url))
            if method == "GET" and encoded:
                shown = f"{shown}?{encoded}"
            self._trace("REQUEST:", method, shown)
            self._trace(encoded)

        try:
            r = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self._trace("Network error:", repr(e))
            raise SubscriptionTransportError(
                f"{method} {path} failed: {e}",
                method=method,
                url=redact_url(str(url)),
                original=e,
            ) from e

        raw = RawResponse(content=r.content, status_code=r.status_code, headers=r.headers)
        self._trace("Sent headers:", format_json(scrub_headers(r.request.headers)))
        self._trace("RESPONSE:", raw.status_code)
        self._trace(raw.content.decode("utf-8", errors="replace"))
        return raw

    def request(
        self,
        method: str,
        path: str,
        params: Optional[ParamSet] = None,
        result_type: Type[T] = dict,  # type: ignore[assignment]
        *,
        timeout: Optional[float] = None,
    ) -> T:
        """
        Execute and decode: a 200 body becomes `result_type`, anything else is
        raised as SubscriptionAPIError.
        """
        raw = self.execute(method, path, params, timeout=timeout)
        if not raw.ok:
            err = decode_error_response(raw.status_code, raw.content, raw.headers)
            self.trace("API error", err.to_dict())
            raise err
        return decode(raw.content, result_type)

    # ------------ public request helpers ------------
    def get(self, path: str, params: Optional[ParamSet] = None, result_type: Type[T] = dict, **kw: Any) -> T:  # type: ignore[assignment]
        return self.request("GET", path, params, result_type, **kw)

    def post(self, path: str, params: Optional[ParamSet] = None, result_type: Type[T] = dict, **kw: Any) -> T:  # type: ignore[assignment]
        # Always send a (possibly empty) form body on POST
        return self.request("POST", path, params if params is not None else [], result_type, **kw)

    def delete(self, path: str, params: Optional[ParamSet] = None, result_type: Type[T] = dict, **kw: Any) -> T:  # type: ignore[assignment]
        return self.request("DELETE", path, params, result_type, **kw)

    def close(self) -> None:
        self._client.close()


__all__ = [
    "API_VERSION",
    "VERSION_HEADER",
    "ParamSet",
    "RawResponse",
    "SubscriptionClient",
    "decode",
    "encode_params",
]
