from pathlib import Path

from setuptools import find_namespace_packages, setup


ROOT = Path(__file__).parent
LONG_DESCRIPTION = (ROOT / "README.md").read_text(encoding="utf-8")


setup(
    name="bible-ref",
    version="0.1.0",
    description="Parse Bible references and fetch the matching verses from a verse API.",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="MIT",
    package_dir={"": "src"},
    packages=find_namespace_packages("src", include=["bible_ref", "bible_ref.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0.1",
        "tqdm>=4.66.0",
    ],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["bible-ref=bible_ref.cli:main"]},
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Religion",
    ],
)
