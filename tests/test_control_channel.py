from src.FaultLogic import ControlChannel, ControlMessage, FaultController, RandomSource


def _channel():
    forwarded = []
    ctl = FaultController(RandomSource(0))
    return ControlChannel(ctl, forwarded.append), ctl, forwarded


def test_parse():
    assert ControlMessage.parse("FaultyEnabled") is ControlMessage.ENABLE
    assert ControlMessage.parse("FaultyDisabled") is ControlMessage.DISABLE
    assert ControlMessage.parse("faultyenabled") is ControlMessage.UNRECOGNIZED
    assert ControlMessage.parse("") is ControlMessage.UNRECOGNIZED


def test_enable_and_disable_toggle_controller():
    channel, ctl, forwarded = _channel()
    assert channel.deliver("FaultyEnabled") is ControlMessage.ENABLE
    assert ctl.enabled
    assert channel.deliver("FaultyDisabled") is ControlMessage.DISABLE
    assert not ctl.enabled
    assert forwarded == []


def test_enable_resets_fired():
    channel, ctl, _ = _channel()
    channel.deliver("FaultyEnabled")
    assert ctl.maybe_fire(1.0)
    channel.deliver("FaultyEnabled")
    assert ctl.armed


def test_unrecognized_messages_are_forwarded_unchanged():
    channel, ctl, forwarded = _channel()
    for msg in ["Syndrome: 01", "FaultyEnabled ", "FAULTYDISABLED"]:
        assert channel.deliver(msg) is ControlMessage.UNRECOGNIZED
    assert forwarded == ["Syndrome: 01", "FaultyEnabled ", "FAULTYDISABLED"]
    assert not ctl.enabled
