#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name='mpc-fzf',
    version='0.3.0',
    description='Browse an MPD library with fzf and queue artists, directories or albums',
    author='mpc-fzf',
    packages=find_packages(exclude=['tests', 'tests.*']),
    entry_points={
        'console_scripts': [
            'mpc-fzf=mpcfzf.cli:main',
        ],
    },
    # Runtime needs only the mpc and fzf executables on PATH
    install_requires=[],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Multimedia :: Sound/Audio',
        'Topic :: Multimedia :: Sound/Audio :: Players',
    ],
    python_requires='>=3.8',
)
