import numpy as np
import pytest

from enigma_machine import ConfigurationError, Reflector, Rotor
from enigma_machine.catalog import ROTORS
from enigma_machine.rotor import ALPHABET, alpha_chr, alpha_ord, check_setting

ROTOR_I = ROTORS[0]


def test_alpha_ord_folds_case():
    assert alpha_ord('A') == 0
    assert alpha_ord('z') == 25
    assert alpha_chr(27) == 'B'


@pytest.mark.parametrize('bad', ['', 'AB', '1', 'é', 'ı', 'ſ', 3])
def test_alpha_ord_rejects_non_letters(bad):
    with pytest.raises(ConfigurationError):
        alpha_ord(bad)


@pytest.mark.parametrize('bad', [-1, 26, 2.0, True, None, 'AA'])
def test_check_setting_range(bad):
    with pytest.raises(ConfigurationError):
        check_setting(bad)


def test_check_setting_accepts_letters_and_numpy_ints():
    assert check_setting('E') == 4
    assert check_setting(np.int64(25)) == 25


def test_forward_at_rest_is_plain_wiring():
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notches)
    assert [alpha_chr(rotor.forward(i)) for i in range(26)] == list(ROTOR_I.wiring)
    assert rotor.backward(alpha_ord('E')) == 0


def test_forward_shifts_by_position_and_ring():
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notches)
    rotor.set_position(1)
    # A enters contact B, wired to K, seen one step back as J
    assert rotor.forward(0) == alpha_ord('J')
    assert rotor.forward(0, realign=False) == alpha_ord('K')

    rotor.set_ring(1)
    assert rotor.forward(0) == alpha_ord('E')


@pytest.mark.parametrize('realign', [True, False])
def test_backward_inverts_forward(realign):
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notches)
    for pos in (0, 7, 25):
        for ring in (0, 3, 25):
            rotor.set_position(pos)
            rotor.set_ring(ring)
            for x in range(26):
                assert rotor.backward(rotor.forward(x, realign), realign) == x


def test_step_wraps_and_tracks_notch():
    rotor = Rotor(ROTOR_I.wiring, 'Q')
    rotor.set_position('P')
    assert not rotor.at_notch()
    rotor.step()
    assert rotor.at_notch()
    assert rotor.get_key() == 'Q'

    rotor.set_position(25)
    rotor.step()
    assert rotor.position == 0


def test_two_notches():
    rotor = Rotor(ROTORS[5].wiring, ROTORS[5].notches)
    assert rotor.notches == (25, 12)
    assert rotor.notch == 25
    rotor.set_position('M')
    assert rotor.at_notch()


def test_wiring_is_read_only():
    rotor = Rotor(ROTOR_I.wiring)
    with pytest.raises(ValueError):
        rotor.map[0] = 1


@pytest.mark.parametrize('wiring', [
    'AACDEFGHIJKLMNOPQRSTUVWXYZ',
    'ABC',
    list(range(1, 27)),
    'ABCDEFGHIJKLMNOPQRSTUVWXY1',
])
def test_rotor_rejects_bad_wiring(wiring):
    with pytest.raises(ConfigurationError):
        Rotor(wiring)


def test_rotor_rejects_bad_notch():
    with pytest.raises(ConfigurationError):
        Rotor(ALPHABET, notches='')
    with pytest.raises(ConfigurationError):
        Rotor(ALPHABET, notches=[30])


def test_reflector_is_involution():
    refl = Reflector('YRUHQSLDPXNGOKMIEBFZCWVJAT', name='B')
    for x in range(26):
        assert refl.apply(x) != x
        assert refl.apply(refl.apply(x)) == x


@pytest.mark.parametrize('wiring', [ALPHABET, ROTOR_I.wiring, 'YRUHQSLDPXNGOKMIEBFZCWVJAA'])
def test_reflector_rejects_bad_wiring(wiring):
    with pytest.raises(ConfigurationError):
        Reflector(wiring)
