"""Setup file for the package."""

from setuptools import setup, find_packages

setup(
    name="newly-launched-scraper",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app"],
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0",
        "playwright>=1.40.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'launch-scraper=launch_scraper.main:main',
        ],
    },
    description="Scrape newly-launched games from the Google Play games storefront",
    python_requires='>=3.8',
)
