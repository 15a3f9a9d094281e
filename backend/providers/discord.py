"""Discord OAuth2 identity provider."""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from shared.exceptions import ConfigurationError

from .base import ProviderProfile
from .exceptions import ExchangeFailedError, ProfileFetchFailedError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://discord.com/api"
DEFAULT_CDN_BASE = "https://cdn.discordapp.com"


class DiscordProvider:
    """Authorization-code flow against Discord.

    Requests the ``identify`` and ``email`` scopes. Network calls use a
    fresh httpx.AsyncClient bounded by ``timeout`` seconds; a custom
    transport can be injected for tests.
    """

    name = "discord"
    scopes = ("identify", "email")

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_url: str,
        api_base: str = DEFAULT_API_BASE,
        cdn_base: str = DEFAULT_CDN_BASE,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not client_id or not client_secret or not redirect_url:
            raise ConfigurationError(
                "Discord OAuth is not configured. Set GUIDEPOST_DISCORD_CLIENT_ID, "
                "GUIDEPOST_DISCORD_CLIENT_SECRET and GUIDEPOST_DISCORD_REDIRECT_URL.",
                setting="discord_client_id",
            )
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_url = redirect_url
        self._api_base = api_base.rstrip("/")
        self._cdn_base = cdn_base.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def authorize_endpoint(self) -> str:
        return f"{self._api_base}/oauth2/authorize"

    @property
    def token_endpoint(self) -> str:
        return f"{self._api_base}/oauth2/token"

    @property
    def profile_endpoint(self) -> str:
        return f"{self._api_base}/users/@me"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def build_authorization_url(self, state: str) -> str:
        params = {
            "response_type": "code",
            "client_id": self._client_id,
            "redirect_uri": self._redirect_url,
            "scope": " ".join(self.scopes),
            "state": state,
            "prompt": "none",
        }
        return f"{self.authorize_endpoint}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Authorization codes are single-use, so this is never retried.
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self._redirect_url,
            "client_id": self._client_id,
            "client_secret": self._client_secret,
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    self.token_endpoint,
                    data=data,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.warning("Discord token exchange transport error: %s", e)
            raise ExchangeFailedError(self.name, "transport error") from e

        if not response.is_success:
            logger.warning("Discord token exchange failed: HTTP %s", response.status_code)
            raise ExchangeFailedError(self.name, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ExchangeFailedError(self.name, "malformed token response") from e

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            raise ExchangeFailedError(self.name, "no access token in response")
        return access_token

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        try:
            async with self._client() as client:
                response = await client.get(
                    self.profile_endpoint,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logger.warning("Discord profile fetch transport error: %s", e)
            raise ProfileFetchFailedError(self.name, "transport error") from e

        if not response.is_success:
            logger.warning("Discord /users/@me failed: HTTP %s", response.status_code)
            raise ProfileFetchFailedError(self.name, f"HTTP {response.status_code}")

        try:
            return ProviderProfile.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ProfileFetchFailedError(self.name, "malformed profile payload") from e

    def avatar_url(self, external_id: str, asset_id: Optional[str]) -> Optional[str]:
        if not asset_id:
            return None
        return f"{self._cdn_base}/avatars/{external_id}/{asset_id}.png?size=128"
