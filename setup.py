from setuptools import setup, find_packages

CORE_DEPS = [
    "yt-dlp",
    "requests",
    "python-dotenv",
    "colorama",
]

TEST_DEPS = [
    "pytest",
]

setup(
    name="ytplay",
    version="0.1.0",
    description="Resolve video page URLs into media player playlists via youtube-dl / yt-dlp",
    packages=find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.8",
    install_requires=CORE_DEPS,
    extras_require={
        "test": TEST_DEPS,
    },
    entry_points={
        "console_scripts": [
            "ytplay=ytplay.main:main",
        ],
    },
)
