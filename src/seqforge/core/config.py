import os
from typing import Mapping, Optional
from pydantic import BaseModel, Field


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LIST_SEPARATOR: str = Field(default=",", min_length=1)
    RETRY_MAX_ATTEMPTS: int = Field(default=3, ge=1)
    RETRY_DELAY_SECONDS: float = Field(default=0.0, ge=0.0)

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``SEQFORGE_*`` environment variables.

        ``LOG_LEVEL`` is read unprefixed so it matches the logger setup.
        Unset variables fall back to the field defaults.
        """
        environ = os.environ if environ is None else environ

        values = {}
        if "LOG_LEVEL" in environ:
            values["LOG_LEVEL"] = environ["LOG_LEVEL"]
        for field_name in ("LIST_SEPARATOR", "RETRY_MAX_ATTEMPTS", "RETRY_DELAY_SECONDS"):
            env_key = f"SEQFORGE_{field_name}"
            if env_key in environ:
                values[field_name] = environ[env_key]

        return cls.model_validate(values)


settings = Settings.load()
