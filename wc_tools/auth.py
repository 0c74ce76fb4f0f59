"""Auth tool — configure the WooCommerce REST session."""

from pydantic import Field

from wc_shared.constants import AUTH_CONFIGURED_MESSAGE

from .client import WooClient
from .models import ToolArgs
from .registry import ToolRegistry


class AuthenticateArgs(ToolArgs):
    site_url: str | None = Field(default=None, alias="siteUrl", description="Overrides WORDPRESS_SITE_URL")
    consumer_key: str | None = Field(default=None, alias="consumerKey", description="Overrides WOOCOMMERCE_CONSUMER_KEY")
    consumer_secret: str | None = Field(
        default=None, alias="consumerSecret", description="Overrides WOOCOMMERCE_CONSUMER_SECRET"
    )


async def authenticate(client: WooClient, args: AuthenticateArgs) -> dict:
    """
    Configure the WooCommerce REST API session.

    Reads WORDPRESS_SITE_URL, WOOCOMMERCE_CONSUMER_KEY and
    WOOCOMMERCE_CONSUMER_SECRET from the environment unless overridden by
    the arguments. Must be called before any other tool; calling it again
    replaces the previous configuration.

    Returns:
        Confirmation message and the computed base URL
    """
    state = client.session.configure(
        site_url=args.site_url,
        consumer_key=args.consumer_key,
        consumer_secret=args.consumer_secret,
    )
    return {"message": AUTH_CONFIGURED_MESSAGE, "baseURL": state.base_url}


def register(registry: ToolRegistry) -> None:
    registry.tool("authenticate", AuthenticateArgs)(authenticate)
