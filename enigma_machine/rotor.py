import numpy as np

from enigma_machine.debug import Debug
from enigma_machine.errors import ConfigurationError

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
SIZE = len(ALPHABET)

debug = Debug()


def alpha_ord(x):
    if not isinstance(x, str) or len(x) != 1 or not x.isascii():
        raise ConfigurationError("expected a single letter, got %r" % (x,))

    # magic 65 from text encoding
    value = ord(x.upper()) - 65

    # only allow A-Z, rejects digits and accented letters alike
    if value < 0 or value > 25:
        raise ConfigurationError("%r is not a letter A-Z" % (x,))

    return value


def alpha_chr(value):
    return ALPHABET[value % SIZE]


def as_table(cipher):
    # letters or indices -> read-only int array
    if isinstance(cipher, str):
        cipher = [alpha_ord(c) for c in cipher]

    try:
        table = np.array(cipher, dtype=int)
    except (TypeError, ValueError):
        raise ConfigurationError("invalid wiring %r" % (cipher,))

    if table.shape != (SIZE,):
        raise ConfigurationError("wiring must have %d entries" % SIZE)

    table.setflags(write=False)
    return table


def check_setting(value, what='position'):
    """Return ``value`` as an offset 0-25; letters map to their index."""
    if isinstance(value, str):
        return alpha_ord(value)

    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConfigurationError("invalid %s %r" % (what, value))
    if value < 0 or value > 25:
        raise ConfigurationError("%s %d outside 0-25" % (what, value))

    return int(value)


class Rotor(object):
    def __init__(self, cipher, notches='A', name=None):
        self.map = as_table(cipher)

        # no duplicate outputs
        if not np.array_equal(np.sort(self.map), np.arange(SIZE)):
            raise ConfigurationError("rotor wiring is not a permutation")

        # argsort of a permutation is its inverse
        self.inverse = np.argsort(self.map)
        self.inverse.setflags(write=False)

        self.set_notches(notches)
        self.name = name

        # set by key or machine setup
        self.position = 0
        self.ring_setting = 0

    @property
    def notch(self):
        return self.notches[0]

    def forward(self, value, realign=True):
        ind = (value + self.position - self.ring_setting) % SIZE
        out = int(self.map[ind])

        if realign:
            out = (out - self.position + self.ring_setting) % SIZE

        debug.log("rotor", "%s fwd %d->%d", self, value, out)
        return out

    def backward(self, value, realign=True):
        ind = value
        if realign:
            ind = (value + self.position - self.ring_setting) % SIZE

        out = (int(self.inverse[ind]) - self.position + self.ring_setting) % SIZE

        debug.log("rotor", "%s bwd %d->%d", self, value, out)
        return out

    def step(self):
        self.position = (self.position + 1) % SIZE

    def at_notch(self):
        return self.position in self.notches

    def set_notches(self, inds):
        if isinstance(inds, str):
            inds = [alpha_ord(c) for c in inds]
        inds = tuple(check_setting(i, 'notch') for i in inds)

        if not inds:
            raise ConfigurationError("rotor needs at least one notch")

        self.notches = inds

    def set_position(self, ind):
        self.position = check_setting(ind, 'position')

    def set_ring(self, ind):
        self.ring_setting = check_setting(ind, 'ring setting')

    def get_key(self):
        return alpha_chr(self.position)

    def __repr__(self):
        return "<Rotor %s pos=%d ring=%d>" % (self.name or '?', self.position, self.ring_setting)


class Reflector(object):
    # stateless, a single instance is shared by every machine
    def __init__(self, cipher, name=None):
        self.map = as_table(cipher)
        self.name = name

        idx = np.arange(SIZE)
        if not np.array_equal(np.sort(self.map), idx):
            raise ConfigurationError("reflector wiring is not a permutation")
        if not np.array_equal(self.map[self.map], idx):
            raise ConfigurationError("reflector wiring must be an involution")
        if np.any(self.map == idx):
            raise ConfigurationError("reflector wiring maps a letter to itself")

    def apply(self, value):
        out = int(self.map[value])
        debug.log("reflector", "%d->%d", value, out)
        return out

    def __repr__(self):
        return "<Reflector %s>" % (self.name or '?')
