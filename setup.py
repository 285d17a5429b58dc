from setuptools import find_namespace_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="traversal-collections",
    version="1.0.0",
    description="A sorted integer container with ascending, side-cross, and prime-filtered iterators.",
    packages=find_namespace_packages(include=["traversal_collections", "traversal_collections.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
