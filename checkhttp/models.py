from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    check_url: str = Field(..., min_length=1)
    smtp_host: str = Field(default="", alias="smtp")
    smtp_user: str = Field(default="", alias="username")
    smtp_password: str = Field(default="", alias="password")
    mail_from: str = Field(default="", alias="from")
    mail_to: str = Field(default="", alias="to")
    mail_subject: str = Field(default="", alias="subject")
    mail_text: str = Field(default="", alias="text")
    smtp_debug: bool = False

    @field_validator(
        "check_url",
        "smtp_host",
        "smtp_user",
        "smtp_password",
        "mail_from",
        "mail_to",
        "mail_subject",
        "mail_text",
        mode="before",
    )
    @classmethod
    def _strip(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("smtp_debug", mode="before")
    @classmethod
    def _parse_bool(cls, v: Any) -> bool:
        # Only "true" (any case) enables debug; everything else is False.
        if isinstance(v, bool):
            return v
        return isinstance(v, str) and v.strip().lower() == "true"

    @classmethod
    def from_properties(cls, raw: Mapping[str, str]) -> "Configuration":
        return cls.model_validate(dict(raw))
