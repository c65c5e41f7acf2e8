# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from setuptools import find_packages, setup


setup(
    name='canonjava',
    version='1.0.0',
    packages=find_packages(include=['canonjava', 'canonjava.*']),
    url='https://github.com/renatahodovan/canonjava',
    license='BSD',
    author='Renata Hodovan, Akos Kiss',
    author_email='hodovan@inf.u-szeged.hu, akiss@inf.u-szeged.hu',
    description='canonjava: Canonical Serializer of Java Syntax Trees',
    long_description=open('README.rst').read(),
    python_requires='>=3.8',
    install_requires=['antlr4-python3-runtime', 'inators'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'canonjava-serialize = canonjava.serialize:execute',
            'canonjava-compare = canonjava.compare:execute',
        ]
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Quality Assurance',
    ],
)
