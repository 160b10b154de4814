from setuptools import setup, find_packages

setup(
    name="skillport",
    version="0.1.0",
    description="skillport - symlink skills from a repository into ~/.claude/skills",
    author="skillport authors",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.16.0",
        "rich>=13.7.1",
        "python-dotenv>=1.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "skillport=skillport.apps.cli.app:app",  # `skillport` command
        ],
    },
)
