from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="subway",
    version="0.1.0",
    description="Multi-source/multi-sink Dijkstra shortest paths over caller-defined graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        # from_networkx() takes a caller-built graph; subway itself never imports networkx
        "networkx": ["networkx"],
        "test": ["pytest", "networkx"],
    },
)
