"""SFTP backend. Forward each request to a remote SFTP server."""

import paramiko

from pysftpio.abstractio import AbstractIO, status_wrapper
from pysftpio.pysftpioexceptions import SFTPIOConnectionError

import os
import socket
import logging
from getpass import getuser

REMOTE_TIMEOUT = 10
SSH2_PORT = 22

logger = logging.getLogger(__name__)

# paramiko raises IOError for failed requests,
# and SFTPError when chdir is asked to enter something that is not a directory.
sftp_status = status_wrapper(IOError, paramiko.SFTPError)


class SFTPIO(AbstractIO):
    """SFTP backend.
    Uses a Paramiko client to run every operation on the remote server.
    """

    def __init__(self):
        self.transport = None
        self.client = None

    @staticmethod
    def split_host(host, port=None):
        """Split host:port.

        Fall back to port (or to the SSH default) when host has no port.
        """
        if ':' in host:
            hostname, port = host.split(':', 1)
            return hostname, int(port)

        return host, port if port else SSH2_PORT

    def open(self, host, username=None, password=None,
             timeout=REMOTE_TIMEOUT, port=None, known_hosts_path=None):
        """Open a SFTP connection to a remote site.

        host can embed the port (example.com:2222).
        Raise SFTPIOConnectionError if the server can't be reached
        or the authentication fails.
        """
        if not username:
            username = getuser()  # defaults to current user
        if timeout is None:
            timeout = REMOTE_TIMEOUT

        error = "Unable to open SFTP connection as {}@{}".format(username, host)

        try:
            hostname, port = SFTPIO.split_host(host, port)
            sock = socket.create_connection((hostname, port), timeout)
        except (ValueError, OSError) as e:
            logger.warning("%s: %s", error, e)
            raise SFTPIOConnectionError(error)

        transport = paramiko.Transport(sock)
        try:
            transport.start_client(timeout=timeout)

            if known_hosts_path:
                self._check_host_key(transport, hostname, port, known_hosts_path)

            transport.auth_password(
                username=username,
                password=password
            )
            client = paramiko.SFTPClient.from_transport(transport)

            # Let's retrieve the current dir
            client.chdir('.')
        except (paramiko.SSHException, paramiko.SFTPError, OSError) as e:
            logger.warning("%s: %s", error, e)
            transport.close()
            raise SFTPIOConnectionError(error)

        self.transport = transport
        self.client = client
        logger.info(
            "connected to %s:%d as %s, cwd is %s",
            hostname, port, username, self.client.getcwd()
        )
        return True

    @staticmethod
    def _check_host_key(transport, hostname, port, known_hosts_path):
        """Compare the server key with the one stored in known_hosts.

        Hosts missing from the file are accepted.
        """
        known_hosts = paramiko.HostKeys()
        known_hosts.load(os.path.realpath(os.path.expanduser(known_hosts_path)))

        ssh_host = hostname if port == SSH2_PORT else "[{}]:{}".format(
            hostname, port)
        pub_k = transport.get_remote_server_key()
        if ssh_host in known_hosts.keys() and not known_hosts.check(ssh_host, pub_k):
            raise paramiko.SSHException(
                "Security warning: "
                "remote key fingerprint {} for hostname "
                "{} didn't match the one in known_hosts".format(
                    pub_k.get_base64(),
                    ssh_host,
                )
            )

    def close(self):
        """Close the connection."""
        self.client.close()
        self.transport.close()
        self.client = None
        self.transport = None

    def pwd(self):
        """Get current working directory."""
        return self.client.getcwd()

    @sftp_status
    def cd(self, dirname):
        """Change current working directory."""
        self.client.chdir(dirname)

    @sftp_status
    def nlist(self):
        """Return the names inside the current working directory."""
        return self.client.listdir()

    @sftp_status
    def _mkdir(self, dirname, mode):
        """Create a single directory.

        mode is ignored: the logged in user's umask is used.
        """
        self.client.mkdir(dirname)

    @sftp_status
    def _rmdir(self, dirname):
        """Remove a single, empty, directory."""
        self.client.rmdir(dirname)

    @sftp_status
    def read(self, filename, dest=None):
        """Read a file.

        Without dest return its content (bytes).
        dest can be a local path or a file object.
        An empty file gives b'' and a failure False:
        check the result with 'is False'.
        """
        if dest is None:
            with self.client.open(filename, 'rb') as f:
                return f.read()

        if isinstance(dest, str):
            self.client.get(filename, dest)
        else:
            self.client.getfo(filename, dest)

    @sftp_status
    def write(self, filename, src, mode=None):
        """Write a file, overwriting it.

        src is either data or a file object.
        mode is ignored, it's only there for signature compatibility.
        """
        if hasattr(src, 'read'):
            self.client.putfo(src, filename)
            return

        if isinstance(src, str):
            src = src.encode()
        with self.client.open(filename, 'wb') as f:
            f.write(src)

    @sftp_status
    def rm(self, filename):
        """Remove file."""
        self.client.remove(filename)

    @sftp_status
    def mv(self, src, dest):
        """Move/rename file or directory."""
        self.client.rename(src, dest)

    @sftp_status
    def chmod(self, filename, mode):
        """Change the mode of a file or directory."""
        self.client.chmod(filename, mode)

    @sftp_status
    def rawls(self):
        """Return the SFTPAttributes of each file in the current directory."""
        return self.client.listdir_attr()
