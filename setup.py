from setuptools import setup, find_packages

setup(
    name="c23-railroad",
    version="0.1.0",
    description="Railroad syntax diagrams for the C23 grammar (Annex A)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "railroad-diagrams>=2.0.0",
        "pyyaml>=5.4.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=6.2.0", "black>=21.0", "flake8>=3.9.0"],
    },
)
