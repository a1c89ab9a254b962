"""
Tests for the rcon command throttle
"""

from pyq3rcon import CommandGate


class TestCommandGate:
    """Test fixed-window throttling"""

    def test_accept_reject_accept(self):
        gate = CommandGate(min_interval=1000)
        assert [gate.try_accept(t) for t in (0, 500, 1200)] == [True, False, True]

    def test_exact_interval_is_accepted(self):
        gate = CommandGate(min_interval=1000)
        assert gate.try_accept(0)
        assert gate.try_accept(1000)

    def test_rejection_keeps_window(self):
        gate = CommandGate(min_interval=1000)
        assert gate.try_accept(0)
        assert not gate.try_accept(999)
        assert gate.last_accepted_at == 0
        assert gate.try_accept(1000)
        assert gate.last_accepted_at == 1000

    def test_no_credit_after_idle(self):
        gate = CommandGate(min_interval=1000)
        assert gate.try_accept(0)
        assert gate.try_accept(60000)
        assert not gate.try_accept(60001)

    def test_first_call_always_accepted(self):
        gate = CommandGate()
        assert gate.try_accept(-5)

    def test_default_clock(self):
        gate = CommandGate(min_interval=1000)
        assert gate.try_accept()
        assert not gate.try_accept()
