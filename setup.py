# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_builder",
    version="0.1.0",
    description="Построение и сериализация robots.txt: группы, правила, карты сайта, Host",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.11",
)
