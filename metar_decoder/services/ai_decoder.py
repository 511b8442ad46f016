"""OpenAI-backed translation of raw METARs into plain English."""

from openai import AsyncOpenAI, OpenAIError

from metar_decoder.config import Settings, get_settings
from metar_decoder.exceptions import MetarDecodeException
from metar_decoder.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

METAR_PROMPT_TEMPLATE = """\
You are a friendly aviation weather decoder. I have a raw METAR report from an airport,
and I need you to translate it into plain English that anyone, including people with no
aviation knowledge, can easily understand.

Decode the METAR below into a conversational, friendly weather summary. Cover:
- Overall sky conditions (clear, partly cloudy, overcast, stormy, etc.)
- Temperature in both Celsius and Fahrenheit
- Wind: speed (in mph and km/h) and direction in plain terms like "from the north"
  or "calm". If gusting, mention it.
- Visibility (in miles and km, note if reduced by fog/haze/rain)
- Any precipitation or significant weather (rain, snow, thunderstorms, fog, etc.)
- Dew point and whether it feels humid
- Barometric pressure in inHg

Start with a one-sentence overall summary (e.g. "It's a clear, cool morning at JFK
with light winds."), then give the detailed breakdown. Keep the tone friendly and
approachable, like you're telling a friend what the weather is like before a trip.

METAR: {raw_metar}
"""

NO_CONTENT_FALLBACK = "Unable to decode the METAR. Raw data: {raw_metar}"


def build_prompt(raw_metar: str) -> str:
    """Fill the decoding prompt with a raw METAR."""
    return METAR_PROMPT_TEMPLATE.format(raw_metar=raw_metar)


class AiDecoder:
    """Sends a raw METAR to the Chat Completions API and returns the summary."""

    def __init__(self, client: AsyncOpenAI, settings: Settings | None = None):
        """Initialize the decoder.

        Args:
            client: Shared OpenAI client
            settings: Settings instance (defaults to singleton)
        """
        if settings is None:
            settings = get_settings()
        self._client = client
        self._model = settings.openai_model
        self._max_completion_tokens = settings.openai_max_completion_tokens

    async def decode(self, raw_metar: str) -> str:
        """Decode a raw METAR into a friendly weather summary.

        When the model answers without any text, a fallback embedding the
        raw METAR is returned instead of raising.

        Args:
            raw_metar: The raw METAR string

        Returns:
            A human-readable weather description

        Raises:
            MetarDecodeException: If the OpenAI request fails
        """
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                max_completion_tokens=self._max_completion_tokens,
                messages=[{"role": "user", "content": build_prompt(raw_metar)}],
            )
        except OpenAIError as e:
            raise MetarDecodeException(
                f"OpenAI API call failed: {str(e)}",
                details={"error_type": type(e).__name__, "model": self._model},
            ) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            log_with_context(
                logger,
                "warning",
                "Model returned no content, using raw METAR fallback",
                model=self._model,
                event_type="decode_empty",
            )
            return NO_CONTENT_FALLBACK.format(raw_metar=raw_metar)

        return content
