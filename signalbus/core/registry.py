"""Signal registry: named channels fanning out typed payloads to listeners.

Listeners bound to different payload types share one name-keyed map. Each
one is stored as a :class:`Subscription` that remembers the payload class
seen at subscribe time; :meth:`SignalRegistry.trigger` compares that class
with the trigger's payload type and skips listeners that do not accept it.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from signalbus.core.exceptions import InvalidPayloadTypeError, InvalidSignalNameError
from signalbus.core.listener import CallbackListener, Listener, payload_class, type_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Subscription:
    """A listener together with the payload class it was subscribed for."""

    listener: Listener
    payload_type: type = object

    def accepts(self, payload_type: type) -> bool:
        return issubclass(payload_type, self.payload_type)


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidSignalNameError(f"Invalid signal name: {name!r}")


def _check_payload_type(tag: Any) -> type:
    cls = payload_class(tag)
    if cls is None:
        raise InvalidPayloadTypeError(f"Invalid payload type: {tag!r}")
    return cls


def _context(name: str, listener: Any = None, **data: Any) -> Dict[str, Any]:
    context: Dict[str, Any] = {"signal": name}
    if listener is not None:
        context["listener"] = repr(listener)
    context.update(data)
    return {"extra_data": context}


class SignalRegistry:
    """Thread-safe synchronous pub/sub registry.

    Mutations hold the registry lock. ``trigger`` copies the listener list
    under the lock and notifies outside it, in subscription order, on the
    caller's thread. Listener exceptions propagate to the caller and stop
    the remaining fan-out.
    """

    def __init__(self) -> None:
        self._subscriptions: Dict[str, List[Subscription]] = {}
        self._lock = threading.Lock()

    def subscribe(self, name: str, listener: Listener) -> Listener:
        """Register *listener* under *name*. Duplicates are kept."""
        _check_name(name)
        payload_type = _check_payload_type(getattr(listener, "payload_type", object))
        subscription = Subscription(listener, payload_type)
        with self._lock:
            self._subscriptions.setdefault(name, []).append(subscription)
            count = len(self._subscriptions[name])
        logger.debug(
            "Subscribed %r to '%s' (%d listeners)",
            listener,
            name,
            count,
            extra=_context(name, listener, payload_type=payload_type.__name__, listeners=count),
        )
        return listener

    def subscribe_callback(
        self,
        name: str,
        callback: Optional[Callable[[Any], None]],
        payload_type: Type = object,
    ) -> CallbackListener:
        """Wrap *callback* in a :class:`CallbackListener` and subscribe it."""
        _check_name(name)
        listener = CallbackListener(callback, payload_type)
        self.subscribe(name, listener)
        return listener

    def unsubscribe(self, name: str, listener: Listener) -> None:
        """Remove the first registration of *listener* under *name*.

        Unknown names and listeners are ignored. A name whose last
        listener is removed disappears from the registry.
        """
        _check_name(name)
        with self._lock:
            subscriptions = self._subscriptions.get(name)
            if subscriptions is None:
                return
            for index, subscription in enumerate(subscriptions):
                if subscription.listener == listener:
                    del subscriptions[index]
                    break
            else:
                return
            remaining = len(subscriptions)
            if not subscriptions:
                del self._subscriptions[name]
        logger.debug(
            "Unsubscribed %r from '%s'",
            listener,
            name,
            extra=_context(name, listener, listeners=remaining),
        )

    def unsubscribe_all(self, name: str) -> None:
        """Drop every listener registered under *name*."""
        _check_name(name)
        with self._lock:
            removed = self._subscriptions.pop(name, None)
        if removed:
            logger.debug(
                "Unsubscribed all %d listeners from '%s'",
                len(removed),
                name,
                extra=_context(name, removed=len(removed)),
            )

    def trigger(self, name: str, data: Any, payload_type: Optional[Type] = None) -> None:
        """Deliver *data* to every listener of *name* that accepts its type.

        The payload type defaults to ``type(data)``; pass *payload_type* to
        dispatch as a broader type (e.g. an ``int`` sent as ``object``).
        """
        _check_name(name)
        tag = type(data) if payload_type is None else _check_payload_type(payload_type)
        with self._lock:
            subscriptions = list(self._subscriptions.get(name, ()))
        if not subscriptions:
            return

        for subscription in subscriptions:
            if not subscription.accepts(tag):
                logger.debug(
                    "Skipping %r on '%s': expects %s, got %s",
                    subscription.listener,
                    name,
                    type_name(subscription.payload_type),
                    type_name(tag),
                    extra=_context(
                        name,
                        subscription.listener,
                        expected=type_name(subscription.payload_type),
                        received=type_name(tag),
                    ),
                )
                continue
            subscription.listener.notify(data)

    def listener_count(self, name: str) -> int:
        with self._lock:
            return len(self._subscriptions.get(name, ()))

    def has_listeners(self, name: str) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return name in self._subscriptions

    def signal_names(self) -> List[str]:
        with self._lock:
            return list(self._subscriptions)

    def clear(self) -> None:
        with self._lock:
            self._subscriptions.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_listeners(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)
