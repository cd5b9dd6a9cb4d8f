from enigma_machine.catalog import DEFAULT_REFLECTOR, REFLECTORS, ROTORS, random_settings
from enigma_machine.errors import ConfigurationError
from enigma_machine.machine import EnigmaMachine
from enigma_machine.plugboard import Plugboard
from enigma_machine.rotor import ALPHABET, Reflector, Rotor

__version__ = '0.1.0'
