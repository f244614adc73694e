# setup.py
from setuptools import setup, find_packages

setup(
    name="objmesh",
    version="1.0.0",
    description="Wavefront OBJ parser producing multi-indexed meshes for rendering",
    packages=find_packages(include=["objmesh", "objmesh.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "PyOpenGL>=3.1.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
