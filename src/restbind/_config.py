from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils.constants import ENV_PREFIX


class Config(BaseSettings):
    """Transport and logging settings for a :class:`~restbind.Session`.

    Values are read from ``RESTBIND_*`` environment variables and from a
    ``.env`` file in the working directory; keyword arguments win over both.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
    )

    timeout: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    verify_ssl: bool = True
    raise_for_status: bool = False
    debug: bool = False
