"""Backend registry.

Pick the backend class from configuration,
so that callers can swap SFTP and local disk transparently.
"""

import logging

from pysftpio.abstractio import AbstractIO
from pysftpio.localio import LocalIO
from pysftpio.sftpio import SFTPIO

logger = logging.getLogger(__name__)

IO_REGISTRY = {
    'sftp': SFTPIO,
    'file': LocalIO,
}


def register_io(name, io_class):
    """Register a new backend class under name.

    Raise ValueError if io_class doesn't subclass AbstractIO.
    """
    if not (isinstance(io_class, type) and issubclass(io_class, AbstractIO)):
        raise ValueError(
            "Backend class must inherit from AbstractIO, got {!r}".format(io_class)
        )

    IO_REGISTRY[name] = io_class
    logger.info("registered backend %s: %s", name, io_class.__name__)


def get_io(name):
    """Return a new, not yet opened, instance of the backend called name."""
    try:
        io_class = IO_REGISTRY[name]
    except KeyError:
        raise ValueError(
            "Unknown backend {!r}, available: {}".format(
                name, ', '.join(sorted(IO_REGISTRY)))
        )
    return io_class()


def io_from_config(config):
    """Build and open a backend from a configuration dictionary.

    The 'type' key selects the backend (sftp by default),
    the other keys are passed to its open method.
    """
    args = dict(config)
    io = get_io(args.pop('type', 'sftp'))
    io.open(**args)
    return io
