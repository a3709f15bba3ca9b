from setuptools import find_packages, setup

NAME = "spline-o-matic"
VERSION = "0.1"

setup(
    name=NAME,
    version=VERSION,
    description='Cubic Bezier splines with mirrored and aligned joints',
    packages=find_packages(include=['splineomatic', 'splineomatic.*']),
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest'],
        'docs': ['Sphinx', 'sphinx-rtd-theme'],
    },
    entry_points={
        'console_scripts': ['splineomatic = splineomatic.cli:main'],
    },
)
