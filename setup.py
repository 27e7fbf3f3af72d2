# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rift-include",
    version="1.0.0",
    description="Recursively expand textual include directives across a directory tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rift", "rift.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rift=rift.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
