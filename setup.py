from setuptools import setup, find_packages

setup(
    name="snippet_formatter",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "snippet-format=snippet_formatter.cli:main",
        ],
        "snippet_formatter.engines": [
            "command=snippet_formatter.engine.command:CommandFormattingEngine",
        ],
    },
    description="Format Java snippets with a whole-file formatter, touching whitespace only.",
)
