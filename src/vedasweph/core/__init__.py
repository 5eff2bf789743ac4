"""Settings and structured logging for vedasweph."""
