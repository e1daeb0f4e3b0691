from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="rideshare",
    version="0.1.0",
    packages=find_packages(include=["rideshare", "rideshare.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rideshare=rideshare.cli_module.cli:main",
        ],
    },
)
