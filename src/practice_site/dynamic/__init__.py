"""
Simulated asynchronous content loading.
"""

from practice_site.dynamic.controller import (
    AsyncioScheduler,
    ContentState,
    DynamicContentController,
    Scheduler,
    simulated_delay,
)

__all__ = [
    "AsyncioScheduler",
    "ContentState",
    "DynamicContentController",
    "Scheduler",
    "simulated_delay",
]
