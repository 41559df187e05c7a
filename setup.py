# -*- coding: utf-8 -*-
# Copyright 2019-2024 The isrmap developers
#
# This file is part of isrmap.
#
# isrmap is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# isrmap is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with isrmap. If not, see <http://www.gnu.org/licenses/>.

from itertools import chain
from setuptools import setup, find_packages


# Get release information without importing anything from the project
with open("isrmap/release.py") as fid:
    for line in fid:
        if line.startswith("author"):
            AUTHOR = line.strip().split(" = ")[-1][1:-1]
        elif line.startswith("maintainer_email"):  # Must be before 'maintainer'
            MAINTAINER_EMAIL = line.strip(" = ").split()[-1][1:-1]
        elif line.startswith("maintainer"):
            MAINTAINER = line.strip().split(" = ")[-1][1:-1]
        elif line.startswith("name"):
            NAME = line.strip().split()[-1][1:-1]
        elif line.startswith("version"):
            VERSION = line.strip().split(" = ")[-1][1:-1]
        elif line.startswith("license"):
            LICENSE = line.strip().split(" = ")[-1][1:-1]

# Projects with optional features for running tests. From setuptools:
# https://setuptools.readthedocs.io/en/latest/setuptools.html#declaring-extras-optional-features-with-their-own-dependencies
extra_feature_requirements = {
    "tests": ["coverage >= 5.0", "pytest >= 5.4", "pytest-cov >= 2.8.1"],
}

# Create a development project, including the tests project
extra_feature_requirements["dev"] = [
    "black >= 19.3b0",
    "pre-commit >= 1.16",
] + list(chain(*list(extra_feature_requirements.values())))

setup(
    # Package description
    name=NAME,
    version=VERSION,
    license=LICENSE,
    python_requires=">=3.10",
    description=(
        "Indexing success rate of an electron backscatter diffraction (EBSD) "
        "orientation map with respect to a reference map."
    ),
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        (
            "License :: OSI Approved :: GNU General Public License v3 or later "
            "(GPLv3+)"
        ),
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    platforms=["Linux", "MacOS X", "Windows"],
    keywords=[
        "EBSD",
        "electron backscatter diffraction",
        "indexing success rate",
        "ISR",
        "orientation map",
        "SEM",
        "scanning electron microscopy",
    ],
    zip_safe=True,
    # Contact
    author=AUTHOR,
    author_email=MAINTAINER_EMAIL,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    # Dependencies
    extras_require=extra_feature_requirements,
    install_requires=[
        "numpy >= 1.20",
        "orix >= 0.12",
        "tqdm >= 0.5.2",
    ],
    # Files to include when distributing package
    packages=find_packages(),
    package_dir={"isrmap": "isrmap"},
    include_package_data=True,
    package_data={"": ["README.rst"], "isrmap": ["*.py"]},
)
