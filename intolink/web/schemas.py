"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Request to shorten a URL. The URL is stored verbatim, without validation."""

    url: str = Field(..., description='The URL to shorten', min_length=1)

    model_config = {
        'json_schema_extra': {
            'examples': [
                {'url': 'https://www.youtube.com/watch?v=XrlY3jdrM_E'},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    message: str = Field(..., description='Human readable summary')
    target_url: str = Field(..., description='The original long URL')
    short_url: str = Field(..., description='The complete short URL')
    shortcode: str = Field(..., description='The short code')


class MessageResponse(BaseModel):
    """Plain message response (ping, not found, errors)."""

    message: str
    errorCode: str | None = None  # noqa: N815
