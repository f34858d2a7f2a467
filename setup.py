from setuptools import setup, find_packages

"""
Front end of the VM to Hack assembly translator.
"""

setup(
    name="vmtranslator",
    version='0.0.1',
    author="lp",
    description="Parser and driver for the stack VM to Hack assembly translator",
    license="GPLv2",
    packages=find_packages(exclude=['tests']),
    long_description="Parser and driver for the stack VM to Hack assembly translator",
    install_requires=[],
    tests_require=['pytest'],
    extras_require={'test': ['pytest']},
    entry_points = {
        'console_scripts': ['vmtranslator=vmtranslator.translator:main'],
    }
)
