#!python

import os.path

from setuptools import find_packages, setup

version_ns = {}
with open(os.path.join("src", "automaton", "version.py")) as f:
    exec(f.read(), version_ns)


if __name__ == "__main__":
    setup(
        name="automaton",
        version=version_ns["versionstring"](),
        package_dir={"": "src"},
        packages=find_packages("src"),
        author="Vincent Vigneron",
        description="Build and simulate DFAs, NFAs and epsilon-NFAs over single characters.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        license="Two-clause BSD license",
        keywords="automaton dfa nfa epsilon finite state",
        zip_safe=True,
        python_requires=">=3.8",
        install_requires=[
            "cached-property==1.5.2",
            "loguru==0.7.2",
        ],
        extras_require={
            "test": [
                "pytest==8.3.2",
            ],
        },
        entry_points={
            "console_scripts": [
                "automaton = automaton.cli:main",
            ],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: BSD License",
            "Natural Language :: English",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Topic :: Text Processing",
        ],
    )
