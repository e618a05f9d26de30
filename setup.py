#!/usr/bin/env python3

"""Setup script for backbone dihedral extraction and Ramachandran plotting."""

from setuptools import setup, find_packages

setup(
    name="ramaplot",
    version="0.1.0",
    description="Backbone phi/psi extraction and Ramachandran plots",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "biopython>=1.79",
        "mdtraj>=1.9.7",
        "matplotlib>=3.5.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "ramachandran-plot=ramaplot.presentation.cli.ramachandran_plot:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
