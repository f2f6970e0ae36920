# state2circuit/config.py
import logging
import os
from typing import List, Optional

from pydantic import BaseModel

ENV_PREFIX = "STATE2CIRCUIT_"


class Settings(BaseModel):
    synthesis_url: str = "https://state-to-circuit.onrender.com"
    # None disables the timeout; the hosted service can take a while to wake up
    synthesis_timeout: Optional[float] = 60.0
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}

        url = environ.get(ENV_PREFIX + "SYNTHESIS_URL")
        if url:
            values["synthesis_url"] = url.rstrip("/")

        timeout = environ.get(ENV_PREFIX + "SYNTHESIS_TIMEOUT")
        if timeout is not None:
            values["synthesis_timeout"] = None if timeout.lower() in ("", "none") else float(timeout)

        origins = environ.get(ENV_PREFIX + "CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        level = environ.get(ENV_PREFIX + "LOG_LEVEL")
        if level:
            values["log_level"] = level.upper()

        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
