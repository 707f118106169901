"""
Cooperative cancellation for long-running resampling loops.

A token is checked between bootstrap replicates, which are the only safe
suspension points. Setting it from another thread stops the loop after the
replicate in flight completes.
"""

import threading


class CancellationToken:
    """
    Thread-safe cancellation flag.

    Usage:
        token = CancellationToken()
        worker = threading.Thread(
            target=bootstrap_ci, args=(failures, suspensions),
            kwargs={'cancel': token},
        )
        worker.start()
        ...
        token.cancel()
    """

    __slots__ = ('_event',)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once cancel() has been called."""
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"
