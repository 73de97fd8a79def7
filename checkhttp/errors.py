from __future__ import annotations


class CheckHttpError(RuntimeError):
    pass


class ResourceError(CheckHttpError):
    """A configuration or pointer file is missing or unreadable."""


class CheckConnectionError(CheckHttpError):
    """The URL to check is malformed. Network failures never raise this."""


class MailError(CheckHttpError):
    pass
