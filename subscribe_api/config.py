import os
import logging
from pydantic import BaseModel

logger = logging.getLogger(__name__)

MAILERLITE_API_URL = "https://connect.mailerlite.com/api"
MAILERLITE_GROUP_ID = "164263897807717645"  # WaitlistLp group
DEFAULT_REQUEST_TIMEOUT = 20.0

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class Settings(BaseModel):
    mailerlite_api_key: str = ""
    cors_allow_origin: str = ""
    mailerlite_api_url: str = MAILERLITE_API_URL
    mailerlite_group_id: str = MAILERLITE_GROUP_ID
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        raw_timeout = os.getenv("REQUEST_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout.strip() else DEFAULT_REQUEST_TIMEOUT
        except ValueError:
            logger.warning("Ignoring invalid REQUEST_TIMEOUT=%r", raw_timeout)
            timeout = DEFAULT_REQUEST_TIMEOUT
        return cls(
            mailerlite_api_key=os.getenv("MAILERLITE_API_KEY", ""),
            cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", ""),
            mailerlite_api_url=os.getenv("MAILERLITE_API_URL", MAILERLITE_API_URL).rstrip("/"),
            mailerlite_group_id=os.getenv("MAILERLITE_GROUP_ID", MAILERLITE_GROUP_ID),
            request_timeout=timeout,
        )


def get_settings() -> Settings:
    # read per request so env changes apply without a restart
    return Settings.from_env()
