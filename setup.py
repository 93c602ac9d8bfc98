import re
from pathlib import Path
from typing import List

from setuptools import setup, find_packages


def read_requirements(path: str = "./requirements.txt") -> List[str]:
    """Read install requirements, skipping blank lines and comments"""
    with open(path) as f:
        lines = f.read().splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


def get_version():
    file = Path("./team_calendar/__init__.py")
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="team_calendar",
    version=get_version(),
    description="Jalali month calendar for team tasks, meetings and holidays",
    zip_safe=False,
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["team-calendar=team_calendar.__main__:main"]},
)
