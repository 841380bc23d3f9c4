"""Setup script for amr_params package."""

from setuptools import setup, find_packages

setup(
    name='amr_params',
    version='1.0',
    packages=find_packages(include=['amr_params', 'amr_params.*']),
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
