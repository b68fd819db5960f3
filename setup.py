from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="anytool",
    version="0.1.0",
    description="Snowflake-style distributed 64-bit id generator",
    author="Anytool Team",
    packages=find_packages(include=["anytool", "anytool.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "anytool=anytool.cli.__main__:main",
        ],
    },
    python_requires=">=3.11",
)
