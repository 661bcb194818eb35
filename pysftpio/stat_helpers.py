from stat import filemode
import time

import pwd
import grp

_paddings = (  # the len of each field of the longname string
    10,
    3,
    8,
    8,
    9,
    12
)


def _owner(uid):
    try:
        return pwd.getpwuid(uid)[0]
    except KeyError:  # no passwd entry, show the number like ls does
        return str(uid)


def _group(gid):
    try:
        return grp.getgrgid(gid)[0]
    except KeyError:
        return str(gid)


def stat_to_longname(st, filename):
    """
    Build an 'ls -l' alike line for filename,
    the same format SFTP servers use for the longname of a listing
    (and the one paramiko's SFTPAttributes print).
    """
    longname = [
        filemode(st.st_mode),
        str(st.st_nlink),
        _owner(st.st_uid),
        _group(st.st_gid),
        str(st.st_size),
        time.strftime("%b %d %H:%M", time.gmtime(st.st_mtime)),
    ]

    # add needed padding
    longname = [
        field.ljust(_paddings[i])
        for i, field in enumerate(longname)
    ]
    longname.append(filename)

    return ' '.join(longname)
