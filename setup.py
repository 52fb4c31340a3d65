from setuptools import setup, find_packages

setup(
    name="mhchain",
    version="0.1.0",
    description="One-dimensional Metropolis-Hastings sampling",
    packages=find_packages(include=["mhchain", "mhchain.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
