from setuptools import find_packages
from setuptools import setup

from linestamp import __version__


def main():
    setup(
        name='linestamp',
        description='Copy stdin to stdout, prefixing each line with a timestamp.',
        version=__version__,
        platforms=['linux'],
        classifiers=[
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: Implementation :: CPython',
        ],
        python_requires='>=3.6',
        packages=find_packages(exclude=('tests*',)),
        install_requires=[
            'frozendict',
            'cached-property',
            'contextlib2',
        ],
        extras_require={
            'testing': ['pytest', 'testfixtures'],
        },
        entry_points={
            'console_scripts': [
                'linestamp = linestamp.cli:main',
            ],
        },
    )


if __name__ == '__main__':
    exit(main())
