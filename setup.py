import os
from setuptools import setup, find_packages

version = '0.1'

here = os.path.dirname(__file__)

with open(os.path.join(here, 'README.rst')) as fp:
    longdesc = fp.read()

with open(os.path.join(here, 'CHANGELOG.rst')) as fp:
    longdesc += "\n\n" + fp.read()

setup(
    name='pcapng-decoder',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='Apache Software License 2.0',
    description='Library to decode the blocks of the pcap-ng format '
    'used by various packet sniffers',
    long_description=longdesc,
    python_requires='>=3.7',
    install_requires=[],
    extras_require={
        'tests': ['pytest'],
    },
    classifiers=[
        "License :: OSI Approved :: Apache Software License",

        # "Development Status :: 1 - Planning",
        # "Development Status :: 2 - Pre-Alpha",
        "Development Status :: 3 - Alpha",
        # "Development Status :: 4 - Beta",
        # "Development Status :: 5 - Production/Stable",

        "Programming Language :: Python :: 3",

        # Should work on all implementations, but further
        # testing is still needed..
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    package_data={'': ['README.rst', 'CHANGELOG.rst']},
    zip_safe=False)
