# setup.py
from setuptools import setup, find_packages

setup(
    name="tweet-stats",
    version="0.1.0",
    description="Running median of unique words per tweet and parallel word counts",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "tqdm",
        "setproctitle",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["tweet-stats=tweet_stats.cli:main"],
    },
)
