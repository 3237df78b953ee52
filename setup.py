from setuptools import setup, find_packages

setup(
    name="extlint",
    version="0.1.0",
    packages=find_packages(include=["extlint", "extlint.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click",
        "pyyaml",
        "tree-sitter>=0.23",
        "tree-sitter-javascript",
        "tree-sitter-typescript",
        "structlog",
        "gitignore-parser",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "extlint = extlint.cli.main:main",
        ],
    },
)
