"""pysftpio Exceptions."""


class SFTPIOException(Exception):

    def __init__(self, msg=None):
        super().__init__(msg)
        self.msg = msg


class SFTPIOConnectionError(SFTPIOException):
    pass


class SFTPIORemoveError(SFTPIOException):
    pass
