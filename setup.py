from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fv-blended-schemes",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Finite-volume face interpolation schemes with Courant-number blending",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/fv-blended-schemes",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Physics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "scipy>=1.7.0",
        "matplotlib>=3.4.0",
        "pyyaml>=5.4.0",
        "pandas>=1.3.0",
        "numba>=0.54.0",
    ],
    extras_require={
        "color": ["colorlog>=6.0"],
        "dev": ["pytest>=6.2.0", "pytest-cov>=2.12.0", "black", "flake8"],
    },
)
