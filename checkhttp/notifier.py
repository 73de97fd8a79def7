from __future__ import annotations

import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage

from checkhttp.errors import MailError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    user: str = ""
    password: str = ""
    debug: bool = False
    port: int = 0  # 0 lets smtplib take the port from "host:port", else 25


class MailNotifier:
    def __init__(self, cfg: SmtpConfig) -> None:
        self.cfg = cfg

    def _build(
        self, mail_from: str, mail_to: str, subject: str, body: str
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = mail_from
        msg["To"] = mail_to
        msg["Subject"] = subject
        msg.set_content(body)
        return msg

    def send(self, mail_from: str, mail_to: str, subject: str, body: str) -> None:
        if not self.cfg.host:
            raise MailError("SMTP host is not configured")

        msg = self._build(mail_from, mail_to, subject, body)
        try:
            with smtplib.SMTP(self.cfg.host, self.cfg.port) as s:
                if self.cfg.debug:
                    s.set_debuglevel(1)
                s.ehlo()
                if s.has_extn("starttls"):
                    s.starttls(context=ssl.create_default_context())
                    s.ehlo()
                if self.cfg.user:
                    s.login(self.cfg.user, self.cfg.password)
                s.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailError(
                f"Failed to send mail via {self.cfg.host}: {exc.__class__.__name__}: {exc}"
            ) from exc
        logger.info("notification sent to %s via %s", mail_to, self.cfg.host)
