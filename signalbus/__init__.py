"""
In-process publish/subscribe over named signals.

Listeners subscribe to a signal name with the payload type they accept;
``trigger`` delivers a payload synchronously to every listener of that
name whose payload type matches.
"""

from signalbus.core.exceptions import (
    InvalidPayloadTypeError,
    InvalidSignalNameError,
    SignalBusError,
)
from signalbus.core.listener import CallbackListener, Listener
from signalbus.core.logging_config import (
    JSONFormatter,
    SignalContextFormatter,
    configure_logging,
    configure_logging_from_settings,
)
from signalbus.core.registry import SignalRegistry, Subscription
from signalbus.core.signals import (
    get_registry,
    registry,
    subscribe,
    subscribe_callback,
    trigger,
    unsubscribe,
    unsubscribe_all,
)

__all__ = [
    # Errors
    "SignalBusError",
    "InvalidSignalNameError",
    "InvalidPayloadTypeError",
    # Listeners
    "Listener",
    "CallbackListener",
    # Registry
    "SignalRegistry",
    "Subscription",
    "registry",
    "get_registry",
    "subscribe",
    "subscribe_callback",
    "unsubscribe",
    "unsubscribe_all",
    "trigger",
    # Logging
    "JSONFormatter",
    "SignalContextFormatter",
    "configure_logging",
    "configure_logging_from_settings",
]
