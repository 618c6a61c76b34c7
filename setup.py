# -*- coding: utf-8 -*-
from setuptools import setup, find_packages


DISTNAME = "scikit-gtmatrix"

PACKAGE_NAME = "gtmatrix"

DESCRIPTION = "Functions which modify a matrix or vector of genotype calls."

VERSION = "0.1.0"

LICENSE = "MIT"

INSTALL_REQUIRES = ["numpy", "dask[array]"]

# full installation with all optional dependencies
EXTRAS_REQUIRE = {
    "full": [
        "pandas",
    ],
    "test": [
        "pytest",
        "pandas",
    ],
}

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: POSIX",
    "Operating System :: Unix",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
]


def setup_package():
    metadata = dict(
        name=DISTNAME,
        version=VERSION,
        description=DESCRIPTION,
        license=LICENSE,
        packages=find_packages(include=[PACKAGE_NAME, PACKAGE_NAME + ".*"]),
        classifiers=CLASSIFIERS,
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        python_requires=">=3.9",
        zip_safe=False,
    )
    setup(**metadata)


if __name__ == "__main__":
    setup_package()
