import pytest

from edi_technical_ack import TechnicalAck

pytestmark = pytest.mark.unit

@pytest.mark.parametrize("ack_requested", [True, False])
def test_enforce_always_requires_ack(ack_requested):
    assert TechnicalAck.ENFORCE.requires_ack(ack_requested) is True

@pytest.mark.parametrize("ack_requested", [True, False])
def test_suppress_never_requires_ack(ack_requested):
    assert TechnicalAck.SUPPRESS.requires_ack(ack_requested) is False

def test_default_follows_interchange_flag():
    assert TechnicalAck.DEFAULT.requires_ack(True) is True
    assert TechnicalAck.DEFAULT.requires_ack(False) is False

def test_policy_has_three_members():
    assert [m.name for m in TechnicalAck] == ["ENFORCE", "DEFAULT", "SUPPRESS"]
