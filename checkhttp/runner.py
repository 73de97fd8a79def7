from __future__ import annotations

import logging
from typing import Sequence

from checkhttp.checks.http_check import run_http
from checkhttp.checks.results import HTTP_OK
from checkhttp.config import settings
from checkhttp.formatting import format_failure
from checkhttp.models import Configuration
from checkhttp.notifier import MailNotifier, SmtpConfig
from checkhttp.properties import load_properties, read_pointer

logger = logging.getLogger(__name__)


def resolve_config_path(args: Sequence[str], pointer_path: str | None = None) -> str:
    if len(args) == 1:
        return args[0]
    return read_pointer(pointer_path or settings.POINTER_PATH)


def build_notifier(configuration: Configuration) -> MailNotifier:
    return MailNotifier(
        SmtpConfig(
            host=configuration.smtp_host,
            user=configuration.smtp_user,
            password=configuration.smtp_password,
            debug=configuration.smtp_debug,
        )
    )


def run_once(configuration: Configuration) -> int:
    url = configuration.check_url
    res = run_http(url)
    if res.status_code != HTTP_OK:
        logger.info("check url %s failed: code = %s", url, res.status_code)
        if res.error:
            logger.debug("transport error: %s", res.error)
        build_notifier(configuration).send(
            configuration.mail_from,
            configuration.mail_to,
            configuration.mail_subject,
            format_failure(configuration.mail_text, url, res.status_code),
        )
    else:
        logger.info("check url %s success", url)
    return res.status_code


def run(args: Sequence[str]) -> None:
    try:
        path = resolve_config_path(args)
        if not path:
            logger.info("path of configuration file is not defined - programme aborted")
            return

        configuration = Configuration.from_properties(load_properties(path))
        run_once(configuration)
    except Exception as e:
        # Every failure ends the run here; the process still exits 0.
        logger.exception("%s", e)
