from __future__ import annotations

import asyncio
from typing import Any, Coroutine, TypeVar

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine from Streamlit's synchronous script thread.

    Each call gets its own event loop, so nothing loop-bound may outlive it.
    """
    return asyncio.run(coro)
