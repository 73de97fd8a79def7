from __future__ import annotations

import logging
import time

import requests
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from checkhttp.checks.results import HTTP_OK, NOT_FOUND, CheckResult
from checkhttp.errors import CheckConnectionError

logger = logging.getLogger(__name__)

_URL = TypeAdapter(AnyHttpUrl)

_MALFORMED = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
)


def validate_url(url: str) -> str:
    try:
        _URL.validate_python(url)
    except ValidationError as exc:
        raise CheckConnectionError(f"malformed URL: {url!r}") from exc
    return url


def run_http(url: str) -> CheckResult:
    validate_url(url)
    start = time.perf_counter()
    try:
        r = requests.get(url)
        latency_ms = int((time.perf_counter() - start) * 1000)
        return CheckResult(
            ok=r.status_code == HTTP_OK, latency_ms=latency_ms, status_code=r.status_code
        )
    except _MALFORMED as e:
        raise CheckConnectionError(f"malformed URL: {url!r}: {e}") from e
    except requests.RequestException as e:
        # Unreachable is reported as NOT_FOUND, same as a real 404.
        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("check of %s failed at transport level: %s", url, e)
        return CheckResult(
            ok=False, latency_ms=latency_ms, status_code=NOT_FOUND, error=str(e)
        )
