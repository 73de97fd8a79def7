from __future__ import annotations

from dataclasses import dataclass

# Status substituted for any transport-level failure.
NOT_FOUND = 404
HTTP_OK = 200


@dataclass
class CheckResult:
    ok: bool
    latency_ms: int
    status_code: int
    error: str | None = None
