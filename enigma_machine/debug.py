import logging

COMPONENTS = ('plugboard', 'rotor', 'reflector', 'stepping', 'encipher')


class Debug(object):
    """Per-component switches in front of the ``enigma_machine`` logger.

    The switch map lives on the class, so enabling a channel through any
    module's ``Debug()`` enables it for the whole package.
    """

    channels = dict.fromkeys(COMPONENTS, False)
    _configured = False

    def __init__(self):
        self.logger = logging.getLogger('enigma_machine')

    @classmethod
    def configure(cls, level=logging.DEBUG):
        # root handler, installed once; the package never does this on import
        if cls._configured:
            return

        logging.basicConfig(
            level=level,
            format='[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        )
        cls._configured = True

    def log(self, component, message, *args):
        if Debug.channels.get(component):
            self.logger.debug('[%s] ' + message, component.upper(), *args)

    def enable(self, *components):
        for c in components:
            if c not in Debug.channels:
                raise ValueError("no such component %r" % c)
            Debug.channels[c] = True
