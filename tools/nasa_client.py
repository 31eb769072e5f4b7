"""
NASA APOD (Astronomy Picture of the Day) API client.

NASA API: https://api.nasa.gov/planetary/apod
- Requires a personal API key, configured by the user in settings
- Rate limits are reported in the X-RateLimit-Remaining response header

Attribution: "Image from NASA Astronomy Picture of the Day" is required.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import httpx
from pydantic import BaseModel, ValidationError, field_validator

from policies import APP_RULES
from store.preferences import PreferenceStore
from tools.errors import DecodeError, MissingCredentialError, TransportError, InvalidResponseError
from tools.http import decode_json, send_get

logger = logging.getLogger(__name__)

APOD_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class AstronomyPicture:
    """NASA Astronomy Picture of the Day."""

    date: str
    title: str
    explanation: str
    image_url: str
    media_type: str
    high_def_url: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "date": self.date,
            "title": self.title,
            "explanation": self.explanation,
            "image_url": self.image_url,
            "high_def_url": self.high_def_url,
            "media_type": self.media_type,
        }


class APODPayload(BaseModel):
    """Wire shape of the APOD JSON body."""

    date: str
    explanation: str
    hdurl: Optional[str] = None
    media_type: str
    title: str
    url: str

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """APOD dates are always YYYY-MM-DD."""
        datetime.strptime(v, APOD_DATE_FORMAT)
        return v

    def to_record(self) -> AstronomyPicture:
        return AstronomyPicture(
            date=self.date,
            title=self.title,
            explanation=self.explanation,
            image_url=self.url,
            media_type=self.media_type,
            high_def_url=self.hdurl,
        )


class NASAClient:
    """
    Async client for NASA APOD API.

    Implements:
    - API key lookup from the preference store (no network call without a key)
    - Single-attempt requests, failures mapped to typed errors
    - Rate-limit quota lookup
    """

    APOD_BASE_URL = APP_RULES.get("endpoints", {}).get(
        "nasa_apod", "https://api.nasa.gov/planetary/apod"
    )
    RATE_LIMIT_HEADER = APP_RULES.get("nasa", {}).get(
        "rate_limit_header", "X-RateLimit-Remaining"
    )

    def __init__(
        self,
        api_key_provider: Optional[Callable[[], Optional[str]]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize NASA client.

        Args:
            api_key_provider: Callable returning the configured API key or None.
                    Defaults to reading the user's preference store.
            base_url: Override for the APOD endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_key_provider = api_key_provider or PreferenceStore().get_nasa_api_key
        self.base_url = base_url or self.APOD_BASE_URL
        self.timeout = timeout
        self.transport = transport

    def _require_api_key(self) -> str:
        api_key = self.api_key_provider()
        if not api_key:
            logger.info("NASA_APOD: No API key configured")
            raise MissingCredentialError()
        return api_key

    async def fetch_apod(self) -> AstronomyPicture:
        """
        Fetch today's Astronomy Picture of the Day.

        Returns:
            AstronomyPicture with title, URLs and explanation

        Raises:
            MissingCredentialError: No API key configured (no request is sent)
            TransportError: Network failure
            InvalidResponseError: Non-2xx status
            DecodeError: Body does not match the APOD schema
        """
        params = {
            "api_key": self._require_api_key(),
        }

        response = await send_get(
            self.base_url,
            params,
            "NASA_APOD",
            timeout=self.timeout,
            transport=self.transport,
        )
        data = decode_json(response, "NASA_APOD")

        try:
            payload = APODPayload.model_validate(data)
        except ValidationError as e:
            logger.error(f"Failed to decode APOD: {e.error_count()} schema errors")
            raise DecodeError(f"APOD response does not match schema: {e}") from e

        return payload.to_record()

    async def remaining_quota(self) -> Optional[int]:
        """
        Read how many API requests the configured key has left.

        Returns:
            Value of the rate-limit header, or None if it cannot be determined
        """
        try:
            params = {"api_key": self._require_api_key()}
            response = await send_get(
                self.base_url,
                params,
                "NASA_QUOTA",
                timeout=self.timeout,
                transport=self.transport,
                check_status=False,
            )
        except (MissingCredentialError, TransportError, InvalidResponseError):
            return None
        except Exception as e:
            logger.warning(f"NASA_QUOTA: Lookup failed - {str(e)}")
            return None

        remaining = response.headers.get(self.RATE_LIMIT_HEADER)
        if remaining is None:
            return None

        try:
            return int(remaining)
        except ValueError:
            logger.warning(f"NASA_QUOTA: Unparseable rate-limit header '{remaining}'")
            return None
