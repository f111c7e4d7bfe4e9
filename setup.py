from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="scansummary",
    version="0.1.0",
    description="Aggregate compliance scan summaries into a categorized, cross-linked report model.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"scansummary.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["pyyaml", "jsonschema", "pandas"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["scansummary=scansummary.cli:main"]},
)
