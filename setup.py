from setuptools import setup, find_packages

setup(
    name="textured-building",
    version="1.0.0",
    packages=find_packages(include=["textured_building", "textured_building.*"]),
    install_requires=[],
    extras_require={
        "dev": ["pytest", "black", "isort"],
    },
    entry_points={
        "console_scripts": [
            "textured-building=textured_building.cli:main",
        ],
    },
    python_requires=">=3.10",
)
