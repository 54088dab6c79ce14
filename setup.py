import os
from os.path import join, dirname

from setuptools import setup, find_packages

from romancodec import __version__

os.umask(0o022)

setup(
    name='romancodec',
    version=__version__,
    description="Conversion between roman numbers and integers",
    license='CC0',
    packages=find_packages(exclude=['tests']),
    long_description=open(join(dirname(__file__), 'README.md')).read(),
    long_description_content_type='text/markdown',
    install_requires=open(join(dirname(__file__), 'requirements.txt')).read(),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    keywords='roman numerals numbers conversion',
    include_package_data=True,
    zip_safe=False,
)
