# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="docnav",
    version="0.1.0",
    description="Alphabetical summary, directory indexes and breadcrumbs for markdown documentation trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["docnav", "docnav.*"]),
    python_requires=">=3.9",
    install_requires=[
        "mkdocs>=1.4",  # Host plugin (docnav.interface.mkdocs)
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'docnav=docnav.main:main',
        ],
        'mkdocs.plugins': [
            'docnav=docnav.interface.mkdocs.plugin:NavigationPlugin',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
