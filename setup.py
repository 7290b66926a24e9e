"""
Installation setup for scryfall_query
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath(
    "scryfall_query/resources/scryfall_query.properties"
)
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """
    Use the requirements file, if able
    :param file_name: Requirements file in the project root
    :return: Requirement specifiers
    """
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []
    return [
        line.strip()
        for line in requirements_file.open(encoding="utf-8").readlines()
        if line.strip() and not line.startswith("#")
    ]


setuptools.setup(
    name="scryfall_query",
    version=config.get("ScryfallQuery", "version", fallback="1.0.0+fallback"),
    description="Paginated query client for the Scryfall card database",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python",
        "Topic :: Games/Entertainment",
        "Topic :: Internet :: WWW/HTTP",
    ],
    keywords=[
        "Card Games",
        "MTG",
        "Scryfall",
        "Trading Cards",
        "Magic: The Gathering",
    ],
    python_requires=">=3.9",
    include_package_data=True,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"scryfall_query": ["resources/*.properties"]},
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
)
