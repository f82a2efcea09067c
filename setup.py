# setup.py
from setuptools import setup, find_packages

setup(
    name="asrr-core",
    version="1.0.0",
    description="Named log file targets with line-count rollover on top of the logging module",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # asrr_core and its subpackages
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
