"""
ZPL Print Service - Setup Script
================================

Install: pip install .
Install dev: pip install -e .[dev]
Install with CUPS queues: pip install .[cups]
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

with open("requirements.txt", "r", encoding="utf-8") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="zpl-print-service",
    version="1.0.0",
    author="ZPL Print Service contributors",
    description="Send raw ZPL label commands to network printers and local print queues",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "zpl_print_service": ["templates/*.html", "samples/*.zpl"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Printing",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "cups": ["pycups>=2.0"],
        "win32": ["pywin32>=306"],
        "dev": ["pytest", "pytest-cov", "black", "flake8"],
    },
    entry_points={
        "console_scripts": [
            "zpl-print-service=zpl_print_service.app:main",
            "zpl-print-network=zpl_print_service.cli:run_network",
            "zpl-print-local=zpl_print_service.cli:run_local",
        ],
    },
)
