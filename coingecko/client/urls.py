"""URL assembly for API requests."""

import re

API_KEY_PARAM = "x_cg_pro_api_key"

_API_KEY_RE = re.compile(rf"({API_KEY_PARAM}=)[^&]*")


def build_url(host: str, endpoint: str, query: str | None, api_key: str | None) -> str:
    """Join host, endpoint path and query string, appending the API key.

    ``query`` must already be encoded and start with ``?``. No normalization
    is applied, so the result is a plain concatenation.
    """
    if query is not None and api_key is not None:
        params = f"{query}&{API_KEY_PARAM}={api_key}"
    elif query is not None:
        params = query
    elif api_key is not None:
        params = f"?{API_KEY_PARAM}={api_key}"
    else:
        params = ""

    return f"{host}{endpoint}{params}"


def redact_url(url: str) -> str:
    """Mask the API key value so the URL is safe to log."""
    return _API_KEY_RE.sub(r"\1***", url)
