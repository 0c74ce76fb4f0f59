"""Session state for the WooCommerce REST API.

The session is configured once by the ``authenticate`` tool and read by
every other tool through the shared :class:`~wc_tools.client.WooClient`.
It holds a single frozen :class:`SessionState`; configuring swaps that
object in one assignment, so a reader sees either the old state or the new
one and never a mix of the two.

There is no locking. Tool calls are expected to arrive one at a time from
a single agent; two concurrent ``authenticate`` calls simply race and the
last one wins.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from wc_shared.constants import ENV_CONSUMER_KEY, ENV_CONSUMER_SECRET, ENV_SITE_URL, JSON_HEADERS, REST_API_PATH

from .config import read_credential_env
from .errors import MissingCredentials, SessionNotConfigured

logger = logging.getLogger("wc_mcp.session")


class SessionState(BaseModel):
    """Everything a request needs to reach the store."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    consumer_key: str
    consumer_secret: str = Field(repr=False)
    headers: dict[str, str] = Field(default_factory=lambda: dict(JSON_HEADERS))

    @property
    def auth(self) -> tuple[str, str]:
        return (self.consumer_key, self.consumer_secret)


def build_base_url(site_url: str) -> str:
    """Strip one trailing slash from the site URL and append the REST root."""
    if site_url.endswith("/"):
        site_url = site_url[:-1]
    return f"{site_url}{REST_API_PATH}"


class Session:
    """Process-wide holder of the current :class:`SessionState`."""

    def __init__(self) -> None:
        self._state: SessionState | None = None

    @property
    def is_configured(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> SessionState:
        """The current state, or ``SessionNotConfigured`` if unset."""
        state = self._state
        if state is None:
            raise SessionNotConfigured()
        return state

    def configure(
        self,
        site_url: str | None = None,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
    ) -> SessionState:
        """Resolve credentials (argument first, env second) and replace the state."""
        env = read_credential_env()
        site_url = site_url or env[ENV_SITE_URL]
        consumer_key = consumer_key or env[ENV_CONSUMER_KEY]
        consumer_secret = consumer_secret or env[ENV_CONSUMER_SECRET]

        if not site_url or not consumer_key or not consumer_secret:
            raise MissingCredentials()

        state = SessionState(
            base_url=build_base_url(site_url),
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
        )
        self._state = state
        logger.info("Session configured for %s", state.base_url)
        return state

    def clear(self) -> None:
        self._state = None
