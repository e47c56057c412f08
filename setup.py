# setup.py
from setuptools import setup

setup(
    name="SmallVolume",
    version="0.1.1",
    description="Sparse voxel storage for cubic world chunks",
    packages=["engine", "world"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
)
