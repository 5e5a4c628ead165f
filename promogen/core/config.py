import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_TEXT_SECTIONS = "CAPTION_TIKTOK:caption,NARASI_PROMOSI:narrative"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def parse_text_sections(raw: str) -> tuple[tuple[str, str], ...]:
    """Parse ``NAME:key,NAME:key`` into ordered (delimiter, response key) pairs.

    A bare ``NAME`` uses its lower-cased name as the response key.
    """
    sections: list[tuple[str, str]] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        name, _, key = item.partition(":")
        name = name.strip()
        key = key.strip() or name.lower()
        if name:
            sections.append((name, key))
    if not sections:
        raise ValueError(f"TEXT_SECTIONS has no usable entries: {raw!r}")
    return tuple(sections)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    google_api_key: str = ""
    google_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta/models/"
    image_model: str = "gemini-2.5-flash-image-preview"
    text_model: str = "gemini-2.5-flash-preview-05-20"
    tts_model: str = "gemini-2.5-flash-preview-tts"
    request_timeout: int = 60
    attempt_timeout: float = 90.0
    image_dispatch: Literal["concurrent", "sequential"] = "concurrent"
    text_sections: tuple[tuple[str, str], ...] = parse_text_sections(DEFAULT_TEXT_SECTIONS)
    wrap_pcm_as_wav: bool = True
    audio_provider: Literal["gemini", "replicate"] = "gemini"
    replicate_api_token: str = ""
    replicate_base_url: str = "https://api.replicate.com/v1"
    replicate_tts_version: str = ""
    poll_interval: float = 1.0
    poll_timeout: float = 120.0
    poll_max_attempts: int = 120
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            google_api_key=os.getenv("GOOGLE_API_KEY", ""),
            google_api_base_url=os.getenv(
                "GOOGLE_API_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/models/"
            ),
            image_model=os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image-preview"),
            text_model=os.getenv("TEXT_MODEL", "gemini-2.5-flash-preview-05-20"),
            tts_model=os.getenv("TTS_MODEL", "gemini-2.5-flash-preview-tts"),
            request_timeout=int(os.getenv("REQUEST_TIMEOUT", "60")),
            attempt_timeout=float(os.getenv("ATTEMPT_TIMEOUT", "90")),
            image_dispatch=os.getenv("IMAGE_DISPATCH", "concurrent").strip().lower(),
            text_sections=parse_text_sections(os.getenv("TEXT_SECTIONS", DEFAULT_TEXT_SECTIONS)),
            wrap_pcm_as_wav=_env_bool("WRAP_PCM_AS_WAV", True),
            audio_provider=os.getenv("AUDIO_PROVIDER", "gemini").strip().lower(),
            replicate_api_token=os.getenv("REPLICATE_API_TOKEN", ""),
            replicate_base_url=os.getenv("REPLICATE_BASE_URL", "https://api.replicate.com/v1"),
            replicate_tts_version=os.getenv("REPLICATE_TTS_VERSION", ""),
            poll_interval=float(os.getenv("POLL_INTERVAL", "1.0")),
            poll_timeout=float(os.getenv("POLL_TIMEOUT", "120")),
            poll_max_attempts=int(os.getenv("POLL_MAX_ATTEMPTS", "120")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
