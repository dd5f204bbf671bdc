from setuptools import setup, find_namespace_packages

setup(
    name="gridchase",
    version="0.1",
    packages=find_namespace_packages(include=["bots", "core", "game", "simulator", "strategy"]),
    py_modules=["main"],
    install_requires=[
        "numpy",
        "pydantic>=2",
        "pydantic-settings",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
