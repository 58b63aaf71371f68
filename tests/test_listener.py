"""Tests for the listener abstraction and callback adapter."""

import typing

import pytest

from signalbus.core.listener import CallbackListener, Listener, payload_class


class TestListener:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            Listener()

    def test_default_payload_type(self):
        class Anything(Listener):
            def notify(self, payload):
                pass

        assert Anything().payload_type is object

    def test_type_argument_sets_payload_type(self):
        class IntListener(Listener[int]):
            def notify(self, payload):
                pass

        assert IntListener.payload_type is int

    def test_generic_type_argument_reduced(self):
        class BatchListener(Listener[list[str]]):
            def notify(self, payload):
                pass

        assert BatchListener.payload_type is list

    def test_explicit_attribute_wins(self):
        class Narrow(Listener[object]):
            payload_type = bool

            def notify(self, payload):
                pass

        assert Narrow.payload_type is bool

    def test_subclass_inherits_bound_type(self):
        class IntListener(Listener[int]):
            def notify(self, payload):
                pass

        class Child(IntListener):
            pass

        assert Child.payload_type is int

    def test_unbound_type_variable_keeps_object(self):
        assert CallbackListener.payload_type is object


class TestCallbackListener:
    def test_forwards_payload(self):
        received = []
        CallbackListener(received.append).notify("hello")
        assert received == ["hello"]

    def test_missing_callback_is_noop(self):
        CallbackListener().notify("ignored")  # no error
        CallbackListener(None, int).notify(1)  # no error

    def test_callback_errors_propagate(self):
        def boom(_):
            raise RuntimeError("listener failed")

        with pytest.raises(RuntimeError, match="listener failed"):
            CallbackListener(boom).notify(1)

    def test_equality(self):
        def handler(_):
            pass

        assert CallbackListener(handler, int) == CallbackListener(handler, int)
        assert CallbackListener(handler, int) != CallbackListener(handler, str)
        assert CallbackListener(handler) != CallbackListener(lambda _: None)

    def test_hashable_for_functions(self):
        def handler(_):
            pass

        assert len({CallbackListener(handler), CallbackListener(handler)}) == 1

    def test_repr(self):
        def on_score(_):
            pass

        text = repr(CallbackListener(on_score, int))
        assert "on_score" in text
        assert "payload_type=int" in text


class TestPayloadClass:
    @pytest.mark.parametrize(
        "tag, expected",
        [
            (int, int),
            (list[int], list),
            (typing.List[int], list),
            (typing.Dict[str, int], dict),
            (typing.Any, object),
        ],
    )
    def test_reduces_to_class(self, tag, expected):
        assert payload_class(tag) is expected

    @pytest.mark.parametrize(
        "tag",
        [typing.Union[int, str], typing.Optional[int], int | None, typing.Literal[1], "int"],
    )
    def test_rejects_non_class_hints(self, tag):
        assert payload_class(tag) is None
