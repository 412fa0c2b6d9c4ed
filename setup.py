"""
/setup.py

Any-two inter-rater agreement for time-coded observations.
"""

import setuptools

with open("requirements.txt", "r", encoding="utf-8") as file:
    requirements = file.read().splitlines()

setuptools.setup(
    name="any-two-agreement",
    version="0.1.0",
    description="Pairwise any-two agreement for time-coded breakdown annotations",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "any_two = any_two.commands:main",
        ]
    },
)
