"""Local filesystem backend."""

import os
import shutil

from pysftpio.abstractio import AbstractIO, status_wrapper
from pysftpio.pysftpioexceptions import SFTPIOConnectionError
from pysftpio.stat_helpers import stat_to_longname

local_status = status_wrapper(OSError)


class LocalIO(AbstractIO):
    """Local disk backend, same interface as the SFTP one.

    The working directory is kept by the instance,
    the process working directory is never changed.
    """

    def __init__(self, umask=None):
        self.home = None
        self.cwd = None
        self.umask = umask

    def open(self, path=None):
        """Home sweet home.

        Start from path (the process working directory by default).
        You should support umask changing too.
        """
        home = os.path.realpath(path or os.getcwd())
        if not os.path.isdir(home):
            raise SFTPIOConnectionError(
                "Unable to open {}: Not a directory".format(home)
            )

        self.home = self.cwd = home
        if self.umask:
            os.umask(self.umask)
        return True

    def close(self):
        """Forget the working directory."""
        self.cwd = None

    def _path(self, filename):
        return os.path.join(self.cwd, filename)

    def pwd(self):
        """Get current working directory."""
        return self.cwd

    def cd(self, dirname):
        """Change current working directory."""
        path = os.path.realpath(self._path(dirname))
        if not os.path.isdir(path):
            return False
        self.cwd = path
        return True

    @local_status
    def nlist(self):
        """Return the names inside the current working directory."""
        return sorted(os.listdir(self.cwd))

    @local_status
    def _mkdir(self, dirname, mode):
        """Create a single directory with given mode."""
        os.mkdir(self._path(dirname), mode)

    @local_status
    def _rmdir(self, dirname):
        """Remove a single, empty, directory."""
        os.rmdir(self._path(dirname))

    @local_status
    def read(self, filename, dest=None):
        """Read a file.

        Without dest return its content (bytes).
        dest can be a path or a file object.
        An empty file gives b'' and a failure False.
        """
        if dest is None:
            with open(self._path(filename), 'rb') as f:
                return f.read()

        if isinstance(dest, str):
            shutil.copyfile(self._path(filename), dest)
        else:
            with open(self._path(filename), 'rb') as f:
                shutil.copyfileobj(f, dest)

    @local_status
    def write(self, filename, src, mode=None):
        """Write data or a file object to filename, overwriting it.

        mode is ignored.
        """
        with open(self._path(filename), 'wb') as f:
            if hasattr(src, 'read'):
                shutil.copyfileobj(src, f)
            else:
                f.write(src.encode() if isinstance(src, str) else src)

    @local_status
    def rm(self, filename):
        """Remove file."""
        os.remove(self._path(filename))

    @local_status
    def mv(self, src, dest):
        """Move/rename file or directory."""
        os.rename(self._path(src), self._path(dest))

    @local_status
    def chmod(self, filename, mode):
        """Change the mode of a file or directory."""
        os.chmod(self._path(filename), mode)

    def stat(self, filename):
        """Return a dictionary of stats, longname included."""
        _stat = os.lstat(self._path(filename))
        return {
            'filename': filename,
            'size': _stat.st_size,
            'uid': _stat.st_uid,
            'gid': _stat.st_gid,
            'perm': _stat.st_mode,
            'atime': _stat.st_atime,
            'mtime': _stat.st_mtime,
            'longname': stat_to_longname(_stat, filename),
        }

    @local_status
    def rawls(self):
        """Return the stats of each file in the current directory."""
        names = self.nlist()
        if names is False:
            return False
        return [self.stat(name) for name in names]
