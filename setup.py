from setuptools import setup, find_packages

setup(
    name="cargoentry",
    version="0.1.0",
    description="Container entry point that builds and tests a Cargo project",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["cargo", "rust", "ci"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests",)),
    install_requires=[
        "returns>=0.19",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cargoentry = cargoentry.main:main",
        ]
    },
)
