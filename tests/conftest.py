import pytest

from enigma_machine import EnigmaMachine
from enigma_machine.debug import COMPONENTS, Debug


def reference_machine(**kwargs):
    settings = dict(rotors=[0, 1, 2], positions=[0, 0, 0], rings=[0, 0, 0], plugboard=[])
    settings.update(kwargs)
    return EnigmaMachine(settings.pop('rotors'), settings.pop('positions'),
                         settings.pop('rings'), **settings)


@pytest.fixture
def machine_pair():
    """Two identically configured machines, one per direction."""
    def build(**kwargs):
        return reference_machine(**kwargs), reference_machine(**kwargs)
    return build


@pytest.fixture
def quiet_debug():
    yield Debug()
    Debug.channels.update(dict.fromkeys(COMPONENTS, False))
