from promogen.core.config import Settings, get_settings
from promogen.core.errors import ConfigurationError


def require_google_key(settings: Settings | None = None) -> str:
    key = (settings or get_settings()).google_api_key
    if not key or not key.strip():
        raise ConfigurationError("GOOGLE_API_KEY is not set")
    return key.strip()


def require_replicate_token(settings: Settings | None = None) -> str:
    token = (settings or get_settings()).replicate_api_token
    if not token or not token.strip():
        raise ConfigurationError("REPLICATE_API_TOKEN is not set")
    return token.strip()
