"""
Shared HTTP client with fixed connect/read timeouts.

Provides a pre-configured ``requests.Session`` whose adapter never retries:
a failed request surfaces immediately to the caller.  Every request gets a
(connect, read) timeout unless the caller passes one explicitly.

Usage::

    from weather_lookup.services.http import session

    with session.get("https://api.example.com/v1/data") as resp:
        payload = resp.json()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_lookup import __version__

#: Callers see the first outcome of every request.
NO_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT: tuple[float, float] = (5.0, 5.0)  # (connect, read) seconds

USER_AGENT = f"weather-lookup/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with a non-retrying adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()
