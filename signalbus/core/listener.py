"""Listener abstraction for the signal registry.

A listener receives payloads of one type, declared either through its
``payload_type`` attribute or as the type argument of :class:`Listener`
(``class ScoreListener(Listener[int])``). The registry records that type
when the listener is subscribed and checks it against every trigger.
"""

import types
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, Type, TypeVar, Union, get_args, get_origin

T = TypeVar("T")


def payload_class(tag: Any) -> Optional[type]:
    """Reduce a payload type hint to the class used for dispatch checks.

    ``list[int]`` and ``typing.List[int]`` become ``list`` and ``Any``
    becomes ``object``. Hints with no class behind them (unions, type
    variables, literals) give ``None``.
    """
    if tag is Any:
        return object
    origin = get_origin(tag) or tag
    if origin is Union or origin is types.UnionType:
        return None
    return origin if isinstance(origin, type) else None


def type_name(tag: Any) -> str:
    return getattr(tag, "__name__", None) or repr(tag)


class Listener(ABC, Generic[T]):
    """Receives a value of type ``T`` and acts on it."""

    payload_type: Type = object

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "payload_type" in cls.__dict__:
            return
        for base in cls.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, Listener)):
                continue
            args = get_args(base)
            bound = payload_class(args[0]) if args else None
            if bound is not None:
                cls.payload_type = bound
            break

    @abstractmethod
    def notify(self, payload: T) -> None:
        """Handle *payload* delivered by a trigger."""


class CallbackListener(Listener[T]):
    """Adapter that forwards payloads to a plain callable.

    Usage::

        listener = CallbackListener(on_score, payload_type=int)
        registry.subscribe("score-changed", listener)

    A missing callback turns :meth:`notify` into a no-op.
    """

    def __init__(
        self,
        callback: Optional[Callable[[T], None]] = None,
        payload_type: Type = object,
    ) -> None:
        self.callback = callback
        self.payload_type = payload_type

    def notify(self, payload: T) -> None:
        if self.callback is not None:
            self.callback(payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CallbackListener):
            return NotImplemented
        return self.callback == other.callback and self.payload_type == other.payload_type

    def __hash__(self) -> int:
        return hash((self.callback, self.payload_type))

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"CallbackListener({name}, payload_type={type_name(self.payload_type)})"
