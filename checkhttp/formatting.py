from __future__ import annotations

from datetime import datetime


def format_timestamp(now: datetime) -> str:
    # e.g. "5 March, 2026 à 09:07:03"
    return f"{now.day} {now.strftime('%B, %Y')} à {now.strftime('%H:%M:%S')}"


def format_failure(
    text: str, url: str, code: int, now: datetime | None = None
) -> str:
    current = now or datetime.now()
    lines = [
        format_timestamp(current),
        "",
        f"{url} - CODE: {code}",
        "",
        text,
    ]
    return "\r\n".join(lines)
