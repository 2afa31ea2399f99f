from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="railgraph",
    version="0.1.0",
    description="Weighted directed graphs with Dijkstra shortest paths and Prim spanning trees.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    package_data={"railgraph.schemas": ["*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.0",
        "PyYAML>=6.0",
        "jsonschema>=4.0",
    ],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["railgraph = railgraph.cli:main"]},
)
