import os

from setuptools import find_packages, setup


def read_file(filename):
    """Read a file in the package."""
    full_filename = os.path.join(
        os.path.abspath(os.path.dirname(__file__)), filename
    )
    with open(full_filename) as f:
        content = f.read()
    return content


name = "cloudcdn"
version = "0.1.0"
description = "Client for a cloud CDN control plane"
long_description = read_file("README.rst")
license = "MIT"
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Topic :: Internet :: WWW/HTTP",
]
keywords = "cdn cloudfiles purge"

# Installation (application runtime) requirements
install_requires = [
    "requests>=2.20",
    "structlog>=21.1",
]

# Test dependencies
tests_require = [
    "pytest>=6.0",
    "responses>=0.17",
]

# Optional installation dependencies
extras_require = {
    "test": tests_require,
    # Recommended extra for development
    "dev": tests_require + ["mypy", "types-requests"],
}

setup(
    name=name,
    version=version,
    description=description,
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license=license,
    classifiers=classifiers,
    keywords=keywords,
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.8",
    tests_require=tests_require,
    install_requires=install_requires,
    extras_require=extras_require,
)
