"""CryptoServe Hash Names setup."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="cryptoserve-hashnames",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "cryptography>=41.0.0",
        ],
    },
    python_requires=">=3.10",
    author="CryptoServe",
    author_email="",
    description="CryptoServe Hash Names - hash algorithm name normalization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/cryptoserve",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security :: Cryptography",
    ],
    keywords="cryptography, hash, webcrypto, jwk, jose",
)
