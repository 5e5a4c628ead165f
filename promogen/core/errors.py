# =============================================================================
# promogen/core/errors.py — Error taxonomy for generation requests
# =============================================================================
# Every kind reaches the HTTP boundary as a 500 with {"error", "details"};
# the class only decides the message and what gets logged.
# =============================================================================


class GenerationError(Exception):
    """Base class for every failure raised while serving a generation request."""

    public_message = "Generation failed."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class ValidationError(GenerationError):
    public_message = "Incomplete or malformed generation request."


class ConfigurationError(GenerationError):
    public_message = "Server credentials are not configured."


class UpstreamCallError(GenerationError):
    public_message = "Error while communicating with the generative AI provider."

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(GenerationError):
    public_message = "The provider response did not contain the expected content."


class AudioExtractionError(ExtractionError):
    public_message = "Audio generation failed, no audio data was returned."


class BatchExhaustedError(GenerationError):
    public_message = "Image generation failed, no image data was returned by any attempt."

    def __init__(self, message: str = "", reasons: list[str] | None = None) -> None:
        super().__init__(message)
        self.reasons = list(reasons or [])


class PollTimeoutError(GenerationError):
    public_message = "Timed out waiting for the provider job to finish."


class PollCancelledError(GenerationError):
    public_message = "Waiting for the provider job was cancelled."
