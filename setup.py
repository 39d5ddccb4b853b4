"""
Setup script for pysatl-mcdist.

Installs the ``pysatl_mcdist`` package from the ``src`` layout.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-mcdist",
    version="0.1.0",
    description="Univariate distributions for Monte Carlo particle transport",
    author="PySATL project",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy>=2.0",
        "scipy>=1.11",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
)
