import argparse
import logging
import sys
from getpass import getuser

from pysftpio.pysftpioexceptions import SFTPIOException
from pysftpio.sftpio import REMOTE_TIMEOUT, SFTPIO


def parse_remote(remote):
    """Split [user[:password]@]host[:port] into (username, password, host)."""
    if '@' in remote:
        username, host = remote.rsplit('@', 1)
    else:
        username, host = None, remote

    password = None
    if username and ':' in username:
        username, password = username.split(':', 1)

    return username or getuser(), password, host


def run_command(io, args):
    """Run the requested command on an opened backend.

    Return the exit status.
    """
    if args.command == 'pwd':
        print(io.pwd())
        return 0

    if args.command == 'ls':
        if args.long:
            attrs = io.rawls()
            ok = attrs is not False
            for attr in attrs or []:
                print(attr)
        else:
            entries = io.ls()
            ok = entries is not False
            for entry in entries or []:
                print(entry['id'])
    elif args.command == 'get':
        if args.local:
            ok = io.read(args.remote, args.local)
        else:
            ok = io.read(args.remote, sys.stdout.buffer)
    elif args.command == 'put':
        with open(args.local, 'rb') as f:
            ok = io.write(args.remote, f)
    elif args.command == 'rm':
        ok = io.rm(args.filename)
    elif args.command == 'mv':
        ok = io.mv(args.src, args.dest)
    elif args.command == 'mkdir':
        ok = io.mkdir(args.dirname, recursive=args.parents)
    elif args.command == 'rmdir':
        ok = io.rmdir(args.dirname, recursive=args.recursive)
    elif args.command == 'chmod':
        ok = io.chmod(args.filename, int(args.mode, 8))

    if not ok:
        print("{} failed".format(args.command), file=sys.stderr)
        return 1
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description='Run file operations on a remote SFTP server.'
    )

    parser.add_argument('remote', type=str,
                        help='the remote SFTP server, '
                             'in the form [user[:password]@]host[:port]')
    parser.add_argument('--port', '-p', dest='port', type=int,
                        help='port of the SFTP server, if not in remote')
    parser.add_argument('--timeout', '-t', dest='timeout', type=int,
                        default=REMOTE_TIMEOUT,
                        help='connection timeout in seconds')
    parser.add_argument('--known-hosts', '-k', dest='known_hosts_path',
                        help='verify the server key against this known_hosts file')
    parser.add_argument('--logfile', '-l', dest='logfile',
                        help='path to the logfile')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='log every operation')

    commands = parser.add_subparsers(dest='command')
    commands.required = True

    commands.add_parser('pwd', help='print the remote working directory')

    ls = commands.add_parser('ls', help='list the remote working directory')
    ls.add_argument('--long', '-l', action='store_true',
                    help='detailed listing')

    get = commands.add_parser('get', help='download a file')
    get.add_argument('remote')
    get.add_argument('local', nargs='?',
                     help='local destination, standard output if missing')

    put = commands.add_parser('put', help='upload a file')
    put.add_argument('local')
    put.add_argument('remote')

    rm = commands.add_parser('rm', help='remove a file')
    rm.add_argument('filename')

    mv = commands.add_parser('mv', help='rename or move a file')
    mv.add_argument('src')
    mv.add_argument('dest')

    mkdir = commands.add_parser('mkdir', help='create a directory')
    mkdir.add_argument('dirname')
    mkdir.add_argument('--parents', '-p', action='store_true',
                       help='create the missing parents too')

    rmdir = commands.add_parser('rmdir', help='remove a directory')
    rmdir.add_argument('dirname')
    rmdir.add_argument('--recursive', '-r', action='store_true',
                       help='remove its content too')

    chmod = commands.add_parser('chmod', help='change file mode')
    chmod.add_argument('mode', help='octal mode, e.g. 755')
    chmod.add_argument('filename')

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        filename=args.logfile,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    username, password, host = parse_remote(args.remote)

    io = SFTPIO()
    try:
        io.open(
            host,
            username=username,
            password=password,
            timeout=args.timeout,
            port=args.port,
            known_hosts_path=args.known_hosts_path
        )
    except SFTPIOException as e:
        print(e.msg, file=sys.stderr)
        return 1

    try:
        return run_command(io, args)
    except SFTPIOException as e:
        print(e.msg, file=sys.stderr)
        return 1
    finally:
        io.close()


if __name__ == '__main__':
    sys.exit(main())
