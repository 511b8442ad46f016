"""Logging helpers with sensitive data redaction."""

import re

# Credentials a configured weather mirror URL may carry; "key" also covers api_key/apikey
SENSITIVE_PARAMS = [
    "key",
    "token",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted)
    return redacted
