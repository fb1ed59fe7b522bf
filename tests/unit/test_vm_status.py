# tests/unit/test_vm_status.py
"""Tests for VmStatus."""

import pytest

from navm.vm import VmState, VmStatus


def test_running():
    status = VmStatus.running()
    assert status.is_running
    assert not status.is_terminated
    assert not status.succeeded
    assert str(status) == "Running"


def test_terminated_ok():
    status = VmStatus.terminated()
    assert status.is_terminated
    assert status.succeeded
    assert status.state == VmState.TERMINATED
    assert str(status) == "Terminated(ok)"


def test_terminated_with_error():
    status = VmStatus.terminated("backend crashed")
    assert status.is_terminated
    assert not status.succeeded
    assert status.error == "backend crashed"
    assert "backend crashed" in str(status)


def test_running_cannot_carry_error():
    with pytest.raises(ValueError):
        VmStatus(state=VmState.RUNNING, error="boom")


def test_status_is_a_value():
    assert VmStatus.terminated("x") == VmStatus.terminated("x")
    assert VmStatus.running() != VmStatus.terminated()
