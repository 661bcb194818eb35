"""Setup configuration file."""

from setuptools import setup


def readme():
    """Open the readme."""
    with open('README.md') as f:
        return f.read()

setup(
    name='pysftpio',
    version='1.0.0',
    description='A generic file I/O layer with an SFTP backend, in Python.',
    long_description=readme(),
    long_description_content_type='text/markdown',

    packages=['pysftpio'],
    scripts=['bin/pysftpio'],
    install_requires=['paramiko', ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',

    keywords=["pysftpio", "sftp", "ssh", "paramiko", "io"],
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 5 - Production/Stable",
        "Environment :: Other Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Topic :: Internet :: File Transfer Protocol (FTP)",
        "Topic :: Utilities"
    ],

    zip_safe=False,
    include_package_data=True,
)
