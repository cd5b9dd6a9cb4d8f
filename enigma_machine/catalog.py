from collections import namedtuple

import numpy as np

from enigma_machine.errors import ConfigurationError
from enigma_machine.rotor import ALPHABET, SIZE, Reflector, Rotor

RotorSpec = namedtuple('RotorSpec', ['name', 'wiring', 'notches'])

# Enigma I / M3 / M4 wheels, in catalog order: id 0 is rotor I
ROTORS = (
    RotorSpec('I',    'EKMFLGDQVZNTOWYHXUSPAIBRCJ', 'Q'),
    RotorSpec('II',   'AJDKSIRUXBLHWTMCQGZNPYFVOE', 'E'),
    RotorSpec('III',  'BDFHJLCPRTXVZNYEIWGAKMUSQO', 'V'),
    RotorSpec('IV',   'ESOVPZJAYQUIRHXLNFTGKDCMWB', 'J'),
    RotorSpec('V',    'VZBRGITYUPSDNHLXAWMJQOFECK', 'Z'),
    RotorSpec('VI',   'JPGVOUMFYQBENHZRDKASXLICTW', 'ZM'),
    RotorSpec('VII',  'NZJHGRCXMYSWBOUFAIVLPEKQDT', 'ZM'),
    RotorSpec('VIII', 'FKQHTLXOCBJSPDZRAMEWNIUYGV', 'ZM'),
)

_ROTOR_NAMES = {spec.name: i for i, spec in enumerate(ROTORS)}

# reflectors carry no state, so one instance serves every machine
REFLECTORS = {
    'A': Reflector('EJMZALYXVBWFCRQUONTSPIKHGD', name='A'),
    'B': Reflector('YRUHQSLDPXNGOKMIEBFZCWVJAT', name='B'),
    'C': Reflector('FVPJIAOYEDRZXWGCTKUQSBNMHL', name='C'),
}

DEFAULT_REFLECTOR = 'B'


def rotor_spec(identifier):
    """Look up a rotor type by catalog index (0 -> I) or roman numeral."""
    if isinstance(identifier, str):
        try:
            return ROTORS[_ROTOR_NAMES[identifier.strip().upper()]]
        except KeyError:
            raise ConfigurationError("unknown rotor %r" % identifier)

    if isinstance(identifier, bool) or not isinstance(identifier, (int, np.integer)):
        raise ConfigurationError("unknown rotor %r" % (identifier,))
    if identifier < 0 or identifier >= len(ROTORS):
        raise ConfigurationError("unknown rotor %d, expected 0-%d" % (identifier, len(ROTORS) - 1))

    return ROTORS[identifier]


def build_rotor(identifier):
    spec = rotor_spec(identifier)
    return Rotor(spec.wiring, spec.notches, name=spec.name)


def get_reflector(identifier=DEFAULT_REFLECTOR):
    if isinstance(identifier, Reflector):
        return identifier

    try:
        return REFLECTORS[str(identifier).strip().upper()]
    except KeyError:
        raise ConfigurationError("unknown reflector %r" % (identifier,))


def random_settings(seed=None, plugs=10, rotor_pool=5):
    """Draw a key sheet entry: three distinct rotors, positions, rings, plugs.

    The same ``seed`` always gives the same settings. ``rotor_pool`` limits
    the draw to the first wheels of the catalog (5 for the Enigma I box).
    """
    if plugs < 0 or plugs > SIZE // 2:
        raise ConfigurationError("plugs must be within 0-%d" % (SIZE // 2))
    if rotor_pool < 3 or rotor_pool > len(ROTORS):
        raise ConfigurationError("rotor_pool must be within 3-%d" % len(ROTORS))

    rng = np.random.default_rng(seed)

    rotors = rng.choice(rotor_pool, 3, replace=False)
    positions = rng.integers(0, SIZE, 3)
    rings = rng.integers(0, SIZE, 3)
    letters = rng.choice(SIZE, (plugs, 2), replace=False)

    return {
        'rotors': [int(r) for r in rotors],
        'positions': [int(p) for p in positions],
        'rings': [int(r) for r in rings],
        'plugboard': [ALPHABET[a] + ALPHABET[b] for a, b in letters],
        'reflector': DEFAULT_REFLECTOR,
    }
