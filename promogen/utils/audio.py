import base64
import io
import wave

PCM_MIME_TYPES = ("audio/l16", "audio/pcm")
DEFAULT_SAMPLE_RATE = 24000


def parse_mime_params(mime_type: str) -> tuple[str, dict[str, str]]:
    """Split ``audio/L16;codec=pcm;rate=24000`` into its base type and parameters."""
    base, *params = [p.strip() for p in mime_type.split(";")]
    parsed: dict[str, str] = {}
    for param in params:
        key, _, value = param.partition("=")
        if key:
            parsed[key.strip().lower()] = value.strip()
    return base.lower(), parsed


def is_raw_pcm(mime_type: str) -> bool:
    base, _ = parse_mime_params(mime_type)
    return base in PCM_MIME_TYPES


def pcm_to_wav(data_b64: str, mime_type: str) -> str:
    """Wrap base64 16-bit PCM samples in a WAV container, returned as base64."""
    _, params = parse_mime_params(mime_type)
    rate = int(params.get("rate", DEFAULT_SAMPLE_RATE))
    channels = int(params.get("channels", 1))
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(channels)
        wav_file.setsampwidth(2)
        wav_file.setframerate(rate)
        wav_file.writeframes(base64.b64decode(data_b64))
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def encode_bytes_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("utf-8")
