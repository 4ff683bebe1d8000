"""Environment-driven settings for marc21.

Values are read from ``MARC21_*`` environment variables:

- ``MARC21_VERBOSE``: emit DEBUG logs from the ``marc21`` logger.
- ``MARC21_LOG_JSON``: render logs as JSON lines instead of console text.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Marc21Settings(BaseSettings):
    """Settings consumed by ``marc21.log.configure_logging``."""

    model_config = SettingsConfigDict(env_prefix="MARC21_", frozen=True)

    verbose: bool = False
    log_json: bool = False


__all__ = ["Marc21Settings"]
