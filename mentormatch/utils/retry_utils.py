from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from mentormatch.common.errors import TransientError


class RetryUtils:
    """
    A utility class that provides pre-configured Tenacity retry instances.
    """

    def __init__(self, max_attempts: int = 3, wait_min: float = 1, wait_max: float = 3):
        self.max_attempts = max_attempts
        self.wait_min = wait_min
        self.wait_max = wait_max

    def get_retry_on_transient(self) -> AsyncRetrying:
        """
        Returns a new Tenacity AsyncRetrying instance configured for transient errors.

        Only TransientError is retried, up to `max_attempts` times with
        exponential backoff; every other exception propagates on the first
        attempt. A fresh instance is built per call so concurrent requests do
        not share retry statistics.
        """
        return AsyncRetrying(
            retry=retry_if_exception_type(TransientError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(
                multiplier=self.wait_min, min=self.wait_min, max=self.wait_max
            ),
            reraise=True,
        )

    async def run_in_session(self, database, operation):
        """
        Run a read-only operation in its own session, retrying transient failures.

        Each attempt opens a fresh session, so a broken connection is never reused.

        Args:
            database (Database): Provides the session context manager.
            operation: Async callable taking the session and returning the result.

        Returns:
            The value returned by `operation`.
        """

        async def attempt():
            async with database.session() as session:
                return await operation(session)

        return await self.get_retry_on_transient()(attempt)
