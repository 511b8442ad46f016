"""Protocol definitions for dependency injection."""

from typing import Protocol


class MetarFetcherProtocol(Protocol):
    """Source of raw METAR observations.

    Implementations return the raw text for a station, which may be empty
    when the station has no current observation, and raise on transport
    or HTTP failures.
    """

    async def fetch_metar(self, airport_code: str) -> str:
        """Fetch the latest raw METAR.

        Args:
            airport_code: Normalized ICAO airport code (e.g. KJFK)

        Returns:
            Raw METAR text, possibly empty
        """
        ...


class MetarDecoderProtocol(Protocol):
    """Translator from raw METAR text to a plain-English summary."""

    async def decode(self, raw_metar: str) -> str:
        """Decode a raw METAR.

        Args:
            raw_metar: Trimmed, non-empty METAR text

        Returns:
            Human-readable weather summary
        """
        ...
