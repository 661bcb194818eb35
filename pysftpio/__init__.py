"""A generic file-I/O layer with SFTP and local disk backends."""

from pysftpio.abstractio import AbstractIO
from pysftpio.pysftpioexceptions import (SFTPIOConnectionError,
                                         SFTPIOException, SFTPIORemoveError)
from pysftpio.registry import get_io, io_from_config, register_io

__all__ = [
    'AbstractIO',
    'SFTPIOException',
    'SFTPIOConnectionError',
    'SFTPIORemoveError',
    'get_io',
    'io_from_config',
    'register_io',
]
