import stat
import unittest
from types import SimpleNamespace

from pysftpio.stat_helpers import stat_to_longname

# no passwd / group entry: shown as numbers
NOBODY = 54321


def _stat(mode, size=5):
    return SimpleNamespace(
        st_mode=mode,
        st_nlink=1,
        st_uid=NOBODY,
        st_gid=NOBODY,
        st_size=size,
        st_mtime=0,
    )


class StatHelpersTest(unittest.TestCase):

    def test_longname_file(self):
        self.assertEqual(
            stat_to_longname(_stat(stat.S_IFREG | 0o644), 'a.txt'),
            '-rw-r--r--' + ' ' +
            '1  ' + ' ' +
            '54321   ' + ' ' +
            '54321   ' + ' ' +
            '5        ' + ' ' +
            'Jan 01 00:00' + ' ' +
            'a.txt'
        )

    def test_longname_modes(self):
        directory = stat_to_longname(_stat(stat.S_IFDIR | 0o750), 'sub')
        self.assertTrue(directory.startswith('drwxr-x--- '))
        self.assertTrue(directory.endswith(' sub'))

        link = stat_to_longname(_stat(stat.S_IFLNK | 0o777), 'link')
        self.assertTrue(link.startswith('lrwxrwxrwx '))

        setuid = stat_to_longname(_stat(stat.S_IFREG | stat.S_ISUID | 0o755), 'bin')
        self.assertTrue(setuid.startswith('-rwsr-xr-x '))
