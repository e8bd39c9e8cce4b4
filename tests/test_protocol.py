import pytest

from helpers import FixedRandom
from dhkex.common.protocol import DhGroup, KeyPair
from dhkex.crypto.errors import InvalidModulusError, InvalidRangeError
from dhkex.crypto.params import rfc3526_group14


def test_group_defaults_to_generator_two():
    group = DhGroup(p=23)
    assert group.g == 2
    assert group.bit_length() == 5


def test_group_key_pair_with_fixed_source():
    group = DhGroup(p=23, g=5)
    pair = group.new_key_pair(FixedRandom(4))
    assert pair.private_key == 6
    assert pair.public_key == 8
    assert group.public_key_for(15) == 19


def test_key_pairs_agree_in_large_group():
    group = rfc3526_group14()
    alice = group.new_key_pair()
    bob = group.new_key_pair()
    assert alice.shared_secret(bob.public_key, group.p) == bob.shared_secret(alice.public_key, group.p)


def test_private_key_hidden_from_repr_and_public_view():
    pair = KeyPair(private_key=123456789, public_key=42)
    assert "123456789" not in repr(pair)
    assert pair.public_view() == {"public_key": 42}


def test_big_ints_survive_model_round_trip():
    group = rfc3526_group14()
    again = DhGroup.model_validate(group.model_dump())
    assert again == group


def test_group_errors_propagate():
    with pytest.raises(InvalidRangeError):
        DhGroup(p=3).new_key_pair()
    with pytest.raises(InvalidModulusError):
        KeyPair(private_key=6, public_key=8).shared_secret(19, 0)
