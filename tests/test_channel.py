import threading

import pytest

from fluents.channel import Channel
from fluents.errors import ChannelClosedError


def test_send_then_recv_returns_item() -> None:
    channel: Channel[str] = Channel("test")
    channel.send("next")
    assert channel.recv() == "next"


def test_send_blocks_while_slot_is_full() -> None:
    channel: Channel[int] = Channel("test")
    channel.send(1)
    sender = threading.Thread(target=channel.send, args=(2,))
    sender.start()
    sender.join(timeout=0.1)
    assert sender.is_alive()

    assert channel.recv() == 1
    sender.join(timeout=5)
    assert not sender.is_alive()
    assert channel.recv() == 2


def test_close_wakes_blocked_receiver() -> None:
    channel: Channel[int] = Channel("test")
    errors: list[BaseException] = []

    def receive() -> None:
        try:
            channel.recv()
        except ChannelClosedError as exc:
            errors.append(exc)

    receiver = threading.Thread(target=receive)
    receiver.start()
    receiver.join(timeout=0.1)
    assert receiver.is_alive()

    channel.close()
    receiver.join(timeout=5)
    assert not receiver.is_alive()
    assert len(errors) == 1


def test_closed_channel_drains_pending_message_then_fails() -> None:
    channel: Channel[int] = Channel("test")
    channel.send(1)
    channel.close()

    assert channel.closed
    assert channel.recv() == 1
    with pytest.raises(ChannelClosedError):
        channel.recv()
    with pytest.raises(ChannelClosedError):
        channel.send(2)


def test_repr_reports_state() -> None:
    channel: Channel[int] = Channel("requests")
    assert repr(channel) == "<Channel requests empty>"
    channel.send(1)
    assert repr(channel) == "<Channel requests full>"
    channel.close()
    assert repr(channel) == "<Channel requests closed>"
