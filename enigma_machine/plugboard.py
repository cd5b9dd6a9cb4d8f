from enigma_machine.debug import Debug
from enigma_machine.errors import ConfigurationError
from enigma_machine.rotor import SIZE, alpha_chr, alpha_ord

debug = Debug()

MAX_PAIRS = SIZE // 2


class Plugboard(object):
    """Symmetric letter swaps applied before and after the rotor stack.

    ``pairs`` may be a string such as ``"AB CD"``, a list of two-letter
    strings, or a list of letter 2-tuples. Unpaired letters map to
    themselves.
    """

    def __init__(self, pairs=()):
        if isinstance(pairs, str):
            pairs = pairs.split()

        pairs = list(pairs)
        if len(pairs) > MAX_PAIRS:
            raise ConfigurationError("at most %d plugboard pairs, got %d" % (MAX_PAIRS, len(pairs)))

        self.map = list(range(SIZE))
        used = set()

        for each in pairs:
            if not isinstance(each, (str, tuple, list)) or len(each) != 2:
                raise ConfigurationError("plugboard pair %r must name two letters" % (each,))

            a, b = (alpha_ord(c) for c in each)
            if a == b:
                raise ConfigurationError("plugboard cannot connect %s to itself" % alpha_chr(a))
            for x in (a, b):
                if x in used:
                    raise ConfigurationError("letter %s already used in plugboard" % alpha_chr(x))

            self.map[a] = b
            self.map[b] = a
            used.update((a, b))

    @property
    def pairs(self):
        return [alpha_chr(a) + alpha_chr(b) for a, b in enumerate(self.map) if a < b]

    def swap(self, value):
        out = self.map[value]
        debug.log("plugboard", "%d->%d", value, out)
        return out

    def __repr__(self):
        return "<Plugboard %s>" % ' '.join(self.pairs)
