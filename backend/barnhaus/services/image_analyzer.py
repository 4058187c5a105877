"""Image analysis service: sends exterior house photos to Anthropic Vision API."""

from __future__ import annotations

import base64
import logging
from pathlib import PurePath

import anthropic
from anthropic.types import ImageBlockParam, TextBlockParam

from barnhaus.exceptions import ImageValidationError, TransportError
from barnhaus.models.materials import MaterialAnalysis
from barnhaus.services.material_parser import parse_material_analysis

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = (
    "You are an expert architectural materials analyst. Identify specific "
    "materials and provide concise, detailed descriptions. Focus on visible "
    "materials and their quality indicators."
)

_QUALITY_SCALE = "(0.9=economy, 1.0=standard, 1.1-1.2=luxury)"

ANALYSIS_PROMPT = (
    "Analyze this house image and identify:\n\n"
    "1. Roofing Material:\n"
    '- Specific material type (e.g., "architectural asphalt shingles", '
    '"slate tiles", "standing seam metal")\n'
    f"- Quality level {_QUALITY_SCALE}\n\n"
    "2. Siding Material:\n"
    '- Specific material type (e.g., "brick veneer", "fiber cement", '
    '"cedar shakes")\n'
    f"- Quality level {_QUALITY_SCALE}\n\n"
    "3. Windows:\n"
    '- Specific type (e.g., "vinyl double-hung", '
    '"aluminum-clad wood casement")\n'
    f"- Quality level {_QUALITY_SCALE}\n\n"
    "4. Doors:\n"
    '- Specific type (e.g., "steel with decorative glass", '
    '"solid wood craftsman")\n'
    f"- Quality level {_QUALITY_SCALE}\n\n"
    "Be specific about materials identified. Avoid generic descriptions."
)


# ---------------------------------------------------------------------------
# Upload validation
# ---------------------------------------------------------------------------

_EXTENSION_MEDIA_TYPES: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
}

SUPPORTED_MEDIA_TYPES = frozenset(_EXTENSION_MEDIA_TYPES.values())

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_JPEG_SIGNATURE = b"\xff\xd8\xff"


def detect_media_type(
    image_bytes: bytes,
    filename: str | None = None,
    media_type: str | None = None,
) -> str:
    """Resolve the media type of an upload.

    Uses the explicit ``media_type`` if given, then the filename
    extension, then the file signature.

    Raises:
        ImageValidationError: If the payload is empty or not JPEG/PNG.
    """
    if not image_bytes:
        msg = "Image upload is empty"
        raise ImageValidationError(msg)

    if media_type:
        normalized = "image/jpeg" if media_type == "image/jpg" else media_type
        if normalized not in SUPPORTED_MEDIA_TYPES:
            msg = f"Unsupported image type '{media_type}'. Use JPEG or PNG."
            raise ImageValidationError(msg)
        return normalized

    if filename:
        suffix = PurePath(filename).suffix.lower()
        if suffix in _EXTENSION_MEDIA_TYPES:
            return _EXTENSION_MEDIA_TYPES[suffix]
        msg = f"Unsupported image file '{filename}'. Use .jpeg, .jpg or .png."
        raise ImageValidationError(msg)

    if image_bytes.startswith(_PNG_SIGNATURE):
        return "image/png"
    if image_bytes.startswith(_JPEG_SIGNATURE):
        return "image/jpeg"

    msg = "Could not determine image type. Use JPEG or PNG."
    raise ImageValidationError(msg)


# ---------------------------------------------------------------------------
# Image Analyzer
# ---------------------------------------------------------------------------


class ImageAnalyzer:
    """Classifies exterior materials in a house photo via Anthropic Vision API."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        timeout: float = 60.0,
        max_tokens: int = 1000,
    ) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout,
        )
        self._model = model
        self._max_tokens = max_tokens

    def analyze(
        self,
        image_bytes: bytes,
        filename: str | None = None,
        media_type: str | None = None,
    ) -> MaterialAnalysis:
        """Analyze one JPEG/PNG photo and return its material analysis.

        Parameters
        ----------
        image_bytes
            Raw bytes of a single uploaded photo.
        filename
            Original file name, used to infer the media type.
        media_type
            Explicit media type, overriding the file name.

        Raises
        ------
        ImageValidationError
            If the upload is empty or not JPEG/PNG.
        TransportError
            If the provider call fails.
        """
        resolved_type = detect_media_type(image_bytes, filename, media_type)
        image_data = base64.b64encode(image_bytes).decode("utf-8")
        user_content = self._build_user_content(image_data, resolved_type)

        raw_response = self._call_api(user_content)
        return parse_material_analysis(raw_response)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _build_user_content(
        image_data: str,
        media_type: str,
    ) -> list[ImageBlockParam | TextBlockParam]:
        """Build the user message content with the prompt and image."""
        return [
            TextBlockParam(type="text", text=ANALYSIS_PROMPT),
            ImageBlockParam(
                type="image",
                source={
                    "type": "base64",
                    "media_type": media_type,
                    "data": image_data,
                },
            ),
        ]

    def _call_api(
        self, user_content: list[ImageBlockParam | TextBlockParam]
    ) -> str:
        """Call the Anthropic Messages API with vision."""
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=0.3,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": user_content}],
            )
        except anthropic.APIError as exc:
            logger.warning("Image analysis request failed: %s", exc)
            msg = f"Image analysis request failed: {exc}"
            raise TransportError(msg) from exc

        text_blocks = [block.text for block in response.content if block.type == "text"]
        return "\n".join(text_blocks)
