"""
Location: vaultix_sdk/retry.py

Summary:
    Retry policy for the request executor: which outcomes may be retried
    and how long to wait before the next attempt.

Usage:
    Used by client.py inside its attempt loop. Exponential backoff starts
    at one second, doubles per retry and is capped at ten seconds.

Example:
    from vaultix_sdk.retry import RetryPolicy

    policy = RetryPolicy(max_retries=3)
    policy.should_retry_status(503, retry_count=0)  # True
    policy.get_delay(0), policy.get_delay(5)        # 1.0, 10.0
"""

BASE_DELAY = 1.0
MAX_DELAY = 10.0

RETRYABLE_STATUS_CODES = frozenset({429})


def is_retryable_status(status_code: int) -> bool:
    """True for rate limiting (429) and any server error (5xx)."""
    return status_code >= 500 or status_code in RETRYABLE_STATUS_CODES


class RetryPolicy:
    """
    Bounded exponential backoff.

    Attributes:
        max_retries: Retries allowed after the first attempt
        base_delay: Delay before the first retry, in seconds
        max_delay: Upper bound for any single delay, in seconds
    """

    def __init__(
        self,
        max_retries: int,
        base_delay: float = BASE_DELAY,
        max_delay: float = MAX_DELAY,
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay

    def can_retry(self, retry_count: int) -> bool:
        """
        Check whether another attempt is allowed.

        Args:
            retry_count: Number of retries already made for this call

        Returns:
            True while the retry budget is not exhausted
        """
        return retry_count < self.max_retries

    def should_retry_status(self, status_code: int, retry_count: int) -> bool:
        """Check whether an HTTP error status should be retried."""
        return self.can_retry(retry_count) and is_retryable_status(status_code)

    def get_delay(self, retry_count: int) -> float:
        """
        Backoff delay before the next attempt.

        Args:
            retry_count: Number of retries already made (0 for the first)

        Returns:
            min(base_delay * 2 ** retry_count, max_delay) seconds
        """
        # Exponent clamped so huge retry budgets cannot overflow a float
        return min(self.base_delay * (2 ** min(retry_count, 32)), self.max_delay)
