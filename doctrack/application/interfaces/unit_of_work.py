"""Transaction port for work that must survive a failed sub-step."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class IUnitOfWork(Protocol):
    """Protocol for the session-level transaction shared by the repositories."""

    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Scope whose writes and errors are rolled back alone.

        An exception raised inside the block undoes only the block and then
        propagates; the enclosing transaction stays usable.
        """
