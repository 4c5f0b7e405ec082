from setuptools import find_packages, setup

setup(
    name="assetlink",
    version="0.1.0",
    description="Link dependency asset directories into a project's namespace directories",
    packages=find_packages(include=["assetlink", "assetlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "assetlink=assetlink.cli:main",
        ],
    },
)
