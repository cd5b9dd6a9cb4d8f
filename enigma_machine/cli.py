import argparse
import json
import logging
import sys

from enigma_machine.catalog import DEFAULT_REFLECTOR, REFLECTORS, random_settings
from enigma_machine.debug import COMPONENTS, Debug
from enigma_machine.errors import ConfigurationError
from enigma_machine.machine import EnigmaMachine

debug = Debug()


def _numbers(raw, what):
    # '0 4 21' -> [0, 4, 21], 'A E V' stays as letters
    values = []
    for token in raw.replace(',', ' ').split():
        if token.isascii() and token.lstrip('-').isdigit():
            values.append(int(token))
        elif len(token) == 1:
            values.append(token)
        else:
            raise ConfigurationError("invalid %s %r" % (what, token))
    return values


def _rotor_ids(raw):
    return [int(t) if t.isascii() and t.isdigit() else t for t in raw.replace(',', ' ').split()]


def prompt_enigma(ask=input, say=print, reflector=DEFAULT_REFLECTOR, realign=False):
    """Collect settings line by line and print the processed message.

    ``ask`` and ``say`` stand in for ``input`` and ``print`` so a test
    can drive the whole exchange with a list of answers.
    """
    message = ask("Enter the message: ")

    while True:
        rotors = ask("Rotors, left to right (blank for 0 1 2): ").strip() or '0 1 2'
        positions = ask("Rotor positions, left to right (e.g. 0 0 0): ")
        rings = ask("Ring settings, left to right (e.g. 0 0 0): ")
        plugs = ask("Plugboard pairs (e.g. AB CD, blank for none): ")

        try:
            machine = EnigmaMachine(_rotor_ids(rotors),
                                    _numbers(positions, 'position'),
                                    _numbers(rings, 'ring setting'),
                                    plugs,
                                    reflector=reflector,
                                    realign=realign)
        except ConfigurationError as e:
            say("Invalid settings: %s" % e)
            continue
        break

    output = machine.process(message)
    say("Output: %s" % output)
    return output


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog='enigma-machine',
                                description="Encrypt or decrypt text with a three-rotor Enigma")
    p.add_argument('-m', '--message', metavar='TEXT', help="Text to process. If omitted, settings are prompted for.")
    p.add_argument('--rotors', default='0 1 2', help="Rotor ids or names, left to right. Default: '0 1 2' (I II III)")
    p.add_argument('--positions', default='0 0 0', help="Start positions 0-25 or letters, left to right. Default: '0 0 0'")
    p.add_argument('--rings', default='0 0 0', help="Ring settings 0-25 or letters, left to right. Default: '0 0 0'")
    p.add_argument('--plugs', default='', help="Plugboard pairs, e.g. 'AB CD'")
    p.add_argument('--reflector', default=DEFAULT_REFLECTOR, choices=sorted(REFLECTORS), help="Reflector. Default: B")
    p.add_argument('--historical', action='store_true', help="Use the textbook Enigma I signal path (realigned rotor contacts).")
    p.add_argument('--random-key', dest='random_key', metavar='SEED', type=int, help="Print a random key sheet entry as JSON and exit.")
    p.add_argument('-v', '--verbose', action='store_true', help="Log stepping and encipher traces to stderr.")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.verbose:
        Debug.configure(logging.DEBUG)
        debug.enable(*COMPONENTS)

    if args.random_key is not None:
        print(json.dumps(random_settings(args.random_key), indent=2))
        return 0

    if args.message is None:
        prompt_enigma(input, print, reflector=args.reflector, realign=args.historical)
        return 0

    try:
        machine = EnigmaMachine(_rotor_ids(args.rotors),
                                _numbers(args.positions, 'position'),
                                _numbers(args.rings, 'ring setting'),
                                args.plugs,
                                reflector=args.reflector,
                                realign=args.historical)
    except ConfigurationError as e:
        print("error: %s" % e, file=sys.stderr)
        return 2

    print(machine.process(args.message))
    return 0


if __name__ == '__main__':
    sys.exit(main())
