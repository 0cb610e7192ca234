import io
from setuptools import setup, find_packages


def read_file(filename, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")

    with io.open(filename, encoding=encoding) as f:
        return f.read()

with open("ctgmap/version.py", "r") as f:
    exec(f.read())

setup(
    name="ctgmap",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Metadata for PyPi
    author="The ctgmap Authors",
    description="Map communication task graphs onto heterogeneous "
                "multiprocessor-on-chip cores",
    long_description=read_file("README.rst"),
    license="GPLv2",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    ],
    keywords="network-on-chip mapping scheduling task graph design space",

    # Requirements
    install_requires=["sentinel"],
    extras_require={
        "test": ["pytest"],
    },

    # Scripts
    entry_points={
        "console_scripts": [
            "ctgmap-schedule = ctgmap.scripts.ctgmap_schedule:main",
            "ctgmap-rewrite = ctgmap.scripts.ctgmap_rewrite:main",
        ],
    }
)
