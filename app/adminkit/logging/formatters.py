"""Custom structlog processors.

Usage:
    from adminkit.logging.formatters import mask_sensitive_data
"""

from typing import Any

# Sensitive field patterns that should be masked in logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "session_id",
        "cookie",
        "phone",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Masks values for keys that contain a sensitive pattern (case-insensitive),
    including keys nested in dict values.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def _is_sensitive(key: str) -> bool:
        key_lower = key.lower()
        return any(pattern in key_lower for pattern in patterns)

    def _mask(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: mask_value if _is_sensitive(str(k)) else _mask(v)
                for k, v in value.items()
            }
        return value

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key in list(event_dict.keys()):
            if key == "event":
                continue
            if _is_sensitive(key):
                event_dict[key] = mask_value
            else:
                event_dict[key] = _mask(event_dict[key])
        return event_dict

    return processor
