"""CredentialRecord model definition"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class CredentialRecord(BaseModel):
    """
    Tokens cached between runs.

    Attributes:
        access_token: Short-lived token authorizing API reads
        refresh_token: Long-lived token used to obtain a new access token.
            Not re-issued on every refresh, so it is only replaced when
            the token endpoint returns a new one.

    Stored on disk under the keys spotifyAccessToken / spotifyRefreshToken.
    """
    access_token: Optional[str] = Field(None, alias="spotifyAccessToken", description="Current access token")
    refresh_token: Optional[str] = Field(None, alias="spotifyRefreshToken", description="Cached refresh token")

    model_config = ConfigDict(populate_by_name=True)
