from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with a per-attempt delay.

    ``max_attempts`` counts the first try. With ``linear`` the delay after
    attempt ``n`` is ``base_delay * n``; otherwise it is ``base_delay``.
    """

    max_attempts: int = 3
    base_delay: float = 0.35
    linear: bool = True

    def delay_for(self, attempt: int) -> float:
        if self.linear:
            return self.base_delay * attempt
        return self.base_delay

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_attempts


COMPLETION_RETRY = RetryPolicy(max_attempts=3, base_delay=0.35, linear=True)
BROADCAST_RETRY = RetryPolicy(max_attempts=3, base_delay=0.25, linear=False)


__all__ = ["BROADCAST_RETRY", "COMPLETION_RETRY", "RetryPolicy"]
