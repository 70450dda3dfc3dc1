from setuptools import setup, find_packages
import os

# Read the README file for long description
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="hsacl",
    version="0.1.0",
    description="File-backed registry of headscale ACL profiles with one-command activation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="hsacl",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # Standard library only at runtime
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        "console_scripts": [
            "hsacl=hsacl.cli:main",
        ],
    },
    python_requires=">=3.8",
    keywords="headscale acl hujson profiles cli",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",

        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Networking",
        "Environment :: Console",
        "Operating System :: OS Independent",
    ],
)
