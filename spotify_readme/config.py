"""Application configuration and environment settings"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # OAuth client credentials - only needed until a refresh token is cached
    SPOTIFY_CLIENT_ID: Optional[str] = Field(None, description="Spotify OAuth client ID")
    SPOTIFY_CLIENT_SECRET: Optional[str] = Field(None, description="Spotify OAuth client secret")
    SPOTIFY_CODE: Optional[str] = Field(None, description="One-time authorization code for the first run")
    SPOTIFY_REDIRECT_URI: str = Field("http://localhost/", description="Redirect URI registered for the authorization code")

    # Endpoints
    SPOTIFY_API_URL: str = Field("https://api.spotify.com/v1", description="Spotify Web API base URL")
    SPOTIFY_TOKEN_URL: str = Field("https://accounts.spotify.com/api/token", description="Spotify token endpoint")
    REQUEST_TIMEOUT: float = Field(15, description="Timeout in seconds for every HTTP request")

    # Files
    AUTH_CACHE_FILE: str = Field("spotify-auth.json", description="Cached access and refresh tokens")
    OUTPUT_FILE: str = Field("readme.md", description="Generated document, overwritten on every run")

    # Template links
    PROFILE_URL: str = Field("https://open.spotify.com/", description="Spotify profile linked from the document")
    ABOUT_URL: Optional[str] = Field(None, description="Optional 'read more' link about the generated file")
    SEARCH_URL: str = Field("https://duckduckgo.com/?q=", description="Search prefix used for genre links")

    LOG_LEVEL: str = Field("INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True
    )

settings = Settings()

# Settings never written to the log
SECRET_FIELDS = {'SPOTIFY_CLIENT_SECRET', 'SPOTIFY_CODE'}
