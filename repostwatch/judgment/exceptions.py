class JudgmentError(Exception):
    """Raised when a generative judgment cannot be obtained."""


class JudgmentNetworkError(JudgmentError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
