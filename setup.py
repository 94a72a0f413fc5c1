"""setup.py

Setup script for the customerdb library

Notes
-----

- Replaces the need for requirements.txt


"""
import pathlib
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# This call to setup() does all the work
setup(
    name="customerdb",
    version="0.1.0",
    description="Seed and query a customers table through DBAPI connections.",
    long_description=README,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Database",
    ],
    python_requires='>=3.10',
    packages=["customerdb", "customerdb.db_helpers"],
    include_package_data=True,
    install_requires=['typing_extensions'],
    extras_require={
        'dev': ['flake8',
                'ipdb',
                'ipython',
                'pytest',
                'pytest-cov',
                ],
        'postgres': ['psycopg2-binary']},
    entry_points={
        "console_scripts": [
            "customerdb=customerdb.runner:main",
        ]
    },
)
