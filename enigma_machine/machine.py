from enigma_machine.catalog import DEFAULT_REFLECTOR, build_rotor, get_reflector
from enigma_machine.debug import Debug
from enigma_machine.errors import ConfigurationError
from enigma_machine.plugboard import Plugboard
from enigma_machine.rotor import ALPHABET, alpha_chr, check_setting

debug = Debug()

ROTOR_COUNT = 3

# ASCII letters only, anything else passes through
_INDEX = {c: i for i, c in enumerate(ALPHABET)}
_INDEX.update((c.lower(), i) for c, i in list(_INDEX.items()))


def _three(values, what):
    # "I II III", "0 4 21" or "AEV"
    if isinstance(values, str):
        values = values.split() if len(values.split()) > 1 else values.strip()
        values = [int(v) if v.isascii() and v.isdigit() else v for v in values]
    try:
        values = list(values)
    except TypeError:
        raise ConfigurationError("%s must be a sequence, got %r" % (what, values))

    if len(values) != ROTOR_COUNT:
        raise ConfigurationError("expected %d %s, got %d" % (ROTOR_COUNT, what, len(values)))
    return values


class EnigmaMachine(object):
    """Three-rotor Enigma with reflector and plugboard.

    ``rotors``, ``positions`` and ``rings`` are given left to right.
    Rotors are catalog ids (``0`` is rotor I) or names (``"III"``);
    positions and rings are offsets 0-25 or letters, also as one string
    (``"0 4 21"`` or ``"AEV"``).

    With ``realign=False`` each rotor hands its output to the next wheel
    without turning it back by its own offset, which is what the
    reference fixtures (``HELLO`` -> ``VNACA``) were produced with.
    ``realign=True`` gives the textbook Enigma I signal path.

    A machine's rotors move with every letter, so decrypting needs a
    second machine built with the same settings.
    """

    def __init__(self, rotors, positions, rings, plugboard=(), reflector=DEFAULT_REFLECTOR,
                 realign=False):
        ids = _three(rotors, 'rotors')
        positions = [check_setting(p, 'position') for p in _three(positions, 'positions')]
        rings = [check_setting(r, 'ring setting') for r in _three(rings, 'ring settings')]

        # everything is validated before the machine holds any of it
        wheels = [build_rotor(i) for i in ids]
        for wheel, pos, ring in zip(wheels, positions, rings):
            wheel.set_position(pos)
            wheel.set_ring(ring)

        self.plugboard = plugboard if isinstance(plugboard, Plugboard) else Plugboard(plugboard)
        self.reflector = get_reflector(reflector)
        self.rotors = wheels
        self.realign = bool(realign)

        self.start = tuple(positions)

    @classmethod
    def from_settings(cls, settings, realign=False):
        """Build a machine from a dict as returned by ``random_settings``."""
        try:
            return cls(settings['rotors'],
                       settings['positions'],
                       settings['rings'],
                       settings.get('plugboard', ()),
                       settings.get('reflector', DEFAULT_REFLECTOR),
                       realign=realign)
        except KeyError as e:
            raise ConfigurationError("missing setting %s" % e)

    @property
    def positions(self):
        return tuple(r.position for r in self.rotors)

    def get_key(self):
        return ''.join(r.get_key() for r in self.rotors)

    def reset(self):
        for r, pos in zip(self.rotors, self.start):
            r.set_position(pos)

    def advance_rotors(self):
        left, middle, right = self.rotors

        # notch state is read before anything moves, otherwise the
        # middle wheel loses its double step
        right_at_notch = right.at_notch()
        middle_at_notch = middle.at_notch()

        if middle_at_notch:
            left.step()
            middle.step()
        elif right_at_notch:
            middle.step()

        right.step()

        debug.log("stepping", "%s", self.get_key())

    def encipher(self, value):
        c = self.plugboard.swap(value)

        for r in reversed(self.rotors):
            c = r.forward(c, self.realign)

        c = self.reflector.apply(c)

        for r in self.rotors:
            c = r.backward(c, self.realign)

        c = self.plugboard.swap(c)

        debug.log("encipher", "%s->%s", alpha_chr(value), alpha_chr(c))
        return c

    def process(self, text):
        out = []
        for ch in text:
            value = _INDEX.get(ch)
            if value is None:
                # digits, spaces and punctuation don't turn the rotors
                out.append(ch)
                continue

            self.advance_rotors()
            out.append(ALPHABET[self.encipher(value)])

        return ''.join(out)

    def __repr__(self):
        names = '-'.join(r.name for r in self.rotors)
        return "<EnigmaMachine %s %s key=%s %r>" % (names, self.reflector.name, self.get_key(), self.plugboard)
