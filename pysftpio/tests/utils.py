"""Various utils."""

import errno
import io
import os
import posixpath

import paramiko


class FakeFile(io.BytesIO):
    """A remote file living in a FakeSFTPClient."""

    def __init__(self, on_close, data=b''):
        super().__init__(data)
        self.on_close = on_close

    def close(self):
        if not self.closed:
            self.on_close(self.getvalue())
        super().close()


class FakeSFTPClient:
    """In memory stand-in for paramiko.SFTPClient.

    Only the calls used by SFTPIO are there, raising what paramiko raises.
    Add (operation, absolute path) tuples to fail to make a call fail.
    """

    def __init__(self, cwd='/home/user'):
        self.cwd = cwd
        self.dirs = {'/'}
        self.files = {}
        self.modes = {}
        self.fail = set()
        self.calls = []
        self.closed = False
        self.add_dir(cwd)

    def add_dir(self, path):
        path = self._abs(path)
        while path not in self.dirs:
            self.dirs.add(path)
            path = posixpath.dirname(path)

    def add_file(self, path, data=b''):
        path = self._abs(path)
        self.add_dir(posixpath.dirname(path))
        self.files[path] = data

    def exists(self, path):
        path = self._abs(path)
        return path in self.dirs or path in self.files

    def _abs(self, path):
        return posixpath.normpath(posixpath.join(self.cwd, path))

    def _request(self, op, path):
        path = self._abs(path)
        self.calls.append((op, path))
        if (op, path) in self.fail:
            raise IOError(errno.EACCES, os.strerror(errno.EACCES))
        return path

    def _children(self, path):
        return sorted(
            posixpath.basename(p) for p in self.dirs | set(self.files)
            if p != path and posixpath.dirname(p) == path
        )

    def chdir(self, path=None):
        path = self._request('chdir', path)
        if path in self.files:
            raise paramiko.SFTPError(
                errno.ENOTDIR,
                "{}: {}".format(os.strerror(errno.ENOTDIR), path)
            )
        if path not in self.dirs:
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
        self.cwd = path

    def getcwd(self):
        return self.cwd

    def listdir(self, path='.'):
        path = self._request('listdir', path)
        return self._children(path)

    def listdir_attr(self, path='.'):
        path = self._request('listdir_attr', path)
        attrs = []
        for name in self._children(path):
            attr = paramiko.SFTPAttributes()
            attr.filename = name
            attr.st_size = len(self.files.get(posixpath.join(path, name), b''))
            attrs.append(attr)
        return attrs

    def mkdir(self, path, mode=0o777):
        path = self._request('mkdir', path)
        if path in self.dirs or path in self.files:
            raise IOError("Failure")
        if posixpath.dirname(path) not in self.dirs:
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
        self.dirs.add(path)

    def rmdir(self, path):
        path = self._request('rmdir', path)
        if path not in self.dirs:
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
        if self._children(path):
            raise IOError("Failure")
        self.dirs.remove(path)

    def remove(self, path):
        path = self._request('remove', path)
        if path not in self.files:
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
        del self.files[path]

    def rename(self, oldpath, newpath):
        oldpath = self._request('rename', oldpath)
        newpath = self._abs(newpath)
        if oldpath in self.files:
            self.files[newpath] = self.files.pop(oldpath)
        elif oldpath in self.dirs:
            prefix = oldpath + '/'
            self.dirs = {
                newpath + p[len(oldpath):] if p == oldpath or p.startswith(prefix) else p
                for p in self.dirs
            }
            self.files = {
                newpath + p[len(oldpath):] if p.startswith(prefix) else p: data
                for p, data in self.files.items()
            }
        else:
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))

    def chmod(self, path, mode):
        path = self._request('chmod', path)
        if not self.exists(path):
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
        self.modes[path] = mode

    def open(self, filename, mode='r'):
        path = self._request('open', filename)
        if 'w' in mode:
            if posixpath.dirname(path) not in self.dirs:
                raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
            return FakeFile(lambda data: self.files.__setitem__(path, data))
        if path not in self.files:
            raise IOError(errno.ENOENT, os.strerror(errno.ENOENT))
        return FakeFile(lambda data: None, self.files[path])

    def get(self, remotepath, localpath):
        with open(localpath, 'wb') as fl:
            self.getfo(remotepath, fl)

    def getfo(self, remotepath, fl):
        with self.open(remotepath, 'rb') as f:
            data = f.read()
        fl.write(data)
        return len(data)

    def putfo(self, fl, remotepath):
        with self.open(remotepath, 'wb') as f:
            f.write(fl.read())

    def close(self):
        self.closed = True
