from setuptools import setup, find_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="spanset",
    version="0.1.0",
    description="Span and span set algebra: containment, intersection and sweep merge",
    author="Sir Wabbit",
    packages=find_packages(),
    py_modules=["spans"],
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.11",
    entry_points={"console_scripts": ["spans=spans:main"]},
)
