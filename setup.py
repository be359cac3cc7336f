from setuptools import find_packages, setup

setup(
    name="aabel",
    version="0.1.0",
    packages=find_packages(exclude=["aabel.tests"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
)
