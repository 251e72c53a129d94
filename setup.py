#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'fontfallback', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as f:
        return f.read()


setup(
    name='fontfallback',
    version=get_version(),
    description='Metric-adjusted fallback fonts for web fonts',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Text Processing :: Fonts',
    ],
    keywords='font fallback css size-adjust font-face',
    license='MIT License',
    package_dir={'': 'src'},
    packages=[
        'fontfallback',
        'fontfallback.core',
        'fontfallback.data',
    ],
    package_data={'fontfallback.data': ['*.json']},
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        'test': [
            'pytest'],
    },
    include_package_data=True,
    entry_points={
        'console_scripts': ['fontfallback=fontfallback.__main__:main']
    },
    )
