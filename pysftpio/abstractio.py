"""Abstract file I/O backend. Subclass it the way you want!"""

import logging
import posixpath

from pysftpio.pysftpioexceptions import SFTPIORemoveError

logger = logging.getLogger(__name__)


def status_wrapper(*exceptions):
    """
    Callers of the generic I/O interface check return values:
    a failing operation must give False, not an exception.
    Each backend lists the exceptions its primitives raise on failure.
    So let's wrap it!
    Methods returning nothing on success give True.
    """
    def _decorator(method):
        def _wrapper(self, *args, **kwargs):
            try:
                result = method(self, *args, **kwargs)
            except exceptions as e:
                logger.debug("%s%r failed: %s", method.__name__, args, e)
                return False

            return True if result is None else result

        return _wrapper

    return _decorator


class AbstractIO:
    """Abstract backend class. Subclass it and override the methods.

    Every backend works against a current working directory cursor:
    relative names are resolved against it and cd moves it.
    The recursive variants of mkdir and rmdir are built here on top of
    the single level primitives, so they move the cursor while walking
    and put it back when they are done.
    Sharing one instance between threads is not safe.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def open(self, **kwargs):
        """Open the backend.

        Return True on success, raise SFTPIOConnectionError otherwise.
        """
        raise NotImplementedError

    def close(self):
        """Close the backend."""
        raise NotImplementedError

    def pwd(self):
        """Return the current working directory."""
        raise NotImplementedError

    def cd(self, dirname):
        """Change the current working directory."""
        raise NotImplementedError

    def nlist(self):
        """Return the names inside the current working directory.

        False if it can't be listed.
        """
        raise NotImplementedError

    def _mkdir(self, dirname, mode):
        """Create a single directory."""
        raise NotImplementedError

    def _rmdir(self, dirname):
        """Remove a single, empty, directory."""
        raise NotImplementedError

    def mkdir(self, dirname, mode=0o777, recursive=True):
        """Create a directory.

        With recursive set, this is analogous to mkdir -p: every missing
        component of dirname is created and components that already
        exist are simply entered: a failed create only counts when the
        component can't be entered afterwards either, so unlike a strict
        create-then-enter walk an existing hierarchy gives True.
        The walk stops at the first component that can't be entered.
        If an error occurs mid-way False is returned and some part
        of the hierarchy might have been created. No rollback is performed.
        """
        if not recursive:
            return self._mkdir(dirname, mode)

        cwd = self.pwd()
        no_errors = True
        if dirname.startswith('/'):
            no_errors = self.cd('/')

        for segment in dirname.split('/'):
            if not no_errors:
                break
            if not segment:
                continue
            if not self._mkdir(segment, mode):
                logger.debug("mkdir(): %s: cannot create, trying to enter it", segment)
            no_errors = self.cd(segment)

        self.cd(cwd)
        return no_errors

    def rmdir(self, dirname, recursive=False):
        """Remove a directory.

        With recursive set, every file and directory inside dirname is
        removed first. A failure (a file that can't be removed, a directory
        that can't be listed) does not stop the removal of the remaining
        entries but makes the whole call return False.
        The working directory is always restored. No rollback is performed.
        """
        if not recursive:
            return self._rmdir(dirname)

        cwd = self.pwd()
        if not self.cd(dirname):
            raise SFTPIORemoveError(
                "chdir(): {}: Not a directory".format(dirname)
            )

        no_errors = True
        try:
            here = self.pwd()
            names = self.nlist()
            if names is False:
                logger.debug("rmdir(): %s: cannot list it", here)
                return False

            for name in names:
                if name in ('.', '..'):
                    continue
                if self.cd(name):  # this is a directory
                    self.cd(here)
                    removed = self.rmdir(name, recursive=True)
                else:
                    removed = self.rm(name)
                if not removed:
                    logger.debug("rmdir(): %s: cannot remove %s", here, name)
                no_errors = removed and no_errors
        finally:
            back = self.cd(cwd)

        # an empty directory ends up here too, as a plain rmdir
        return no_errors and back and self._rmdir(dirname)

    def read(self, filename, dest=None):
        """Read a file.

        Return its content if dest is None,
        otherwise write it to dest (a path or a file object).
        """
        raise NotImplementedError

    def write(self, filename, src, mode=None):
        """Write data or a file object to filename."""
        raise NotImplementedError

    def rm(self, filename):
        """Remove file."""
        raise NotImplementedError

    def mv(self, src, dest):
        """Move/rename file or directory."""
        raise NotImplementedError

    def chmod(self, filename, mode):
        """Change the mode of a file or directory."""
        raise NotImplementedError

    def ls(self, grep=None):
        """List the current working directory.

        Return a list of {'text': name, 'id': full path} entries,
        False if the directory can't be listed.
        grep is ignored.
        """
        names = self.nlist()
        if names is False:
            return False

        cwd = self.pwd()
        return [
            {'text': name, 'id': posixpath.join(cwd, name)}
            for name in names
        ]

    def rawls(self):
        """Return the detailed listing of the current working directory,
        False if it can't be listed.
        """
        raise NotImplementedError
