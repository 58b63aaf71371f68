"""Process-wide signal registry and module-level shortcuts.

The registry is created once at import time and lives for the whole
process. Code that wants isolation (tests, embedded components) can
construct its own :class:`SignalRegistry` instead.
"""

from typing import Any, Callable, Optional, Type

from signalbus.core.listener import CallbackListener, Listener
from signalbus.core.registry import SignalRegistry

# Module-level singleton
registry = SignalRegistry()


def get_registry() -> SignalRegistry:
    return registry


def subscribe(name: str, listener: Listener) -> Listener:
    return registry.subscribe(name, listener)


def subscribe_callback(
    name: str,
    callback: Optional[Callable[[Any], None]],
    payload_type: Type = object,
) -> CallbackListener:
    return registry.subscribe_callback(name, callback, payload_type)


def unsubscribe(name: str, listener: Listener) -> None:
    registry.unsubscribe(name, listener)


def unsubscribe_all(name: str) -> None:
    registry.unsubscribe_all(name)


def trigger(name: str, data: Any, payload_type: Optional[Type] = None) -> None:
    registry.trigger(name, data, payload_type)
