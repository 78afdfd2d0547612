from setuptools import setup, find_packages

setup(
    name="attrtext",
    version="0.1.0",
    description="Styled text spans rendered for the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
