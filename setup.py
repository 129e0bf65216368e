"""
Setuptools build script for the toy_robot_sim package.

This setup.py file enables:
- Editable installs for development (``pip install -e .[test]``)
- Dependency management from requirements.txt and requirements-dev.txt
- Registration of the ``toy-robot`` command-line entry point

The version is read from ``toy_robot_sim/core/constants.py`` as text so that
building never has to import the package (and therefore its dependencies).
"""

import pathlib  # Path manipulation for reading README and requirements files
import re  # Version extraction without importing the package

import setuptools

# Global path constants for consistent file location management across build operations
HERE = pathlib.Path(__file__).parent
PACKAGE_DIR = HERE / 'toy_robot_sim'
CONSTANTS_PATH = PACKAGE_DIR / 'core' / 'constants.py'
README_PATH = HERE / 'README.md'
REQUIREMENTS_PATH = HERE / 'requirements.txt'
DEV_REQUIREMENTS_PATH = HERE / 'requirements-dev.txt'

# Package metadata constants
PACKAGE_NAME = 'toy-robot-sim'
AUTHOR = 'toy_robot_sim Development Team'
DESCRIPTION = 'Single robot on a bounded table: command validation, boundary checks and templated messages'
LICENSE = 'MIT'

KEYWORDS = ['robot', 'simulation', 'grid', 'command line', 'state machine']

CLASSIFIERS = [
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: MIT License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: 3.13',
]

# Used when requirements files are missing from an sdist
FALLBACK_INSTALL_REQUIRES = [
    'pydantic>=2.5.0',
    'loguru>=0.7.0',
    'PyYAML>=6.0',
]
FALLBACK_TEST_REQUIRES = [
    'pytest>=8.0.0',
    'pytest-cov>=4.0.0',
    'hypothesis>=6.90.0',
]


def read_requirements(requirements_file: pathlib.Path) -> list:
    """
    Reads and parses requirements from specified requirements file, skipping comments
    and blank lines.

    Args:
        requirements_file (pathlib.Path): Path to requirements file for dependency parsing

    Returns:
        list: List of requirement strings suitable for setuptools install_requires specification
    """
    if not requirements_file.exists():
        return []

    requirements = []
    for line in requirements_file.read_text(encoding='utf-8').splitlines():
        # Remove inline comments while preserving package specifications
        line = line.split('#')[0].strip()
        if line:
            requirements.append(line)
    return requirements


def read_long_description() -> str:
    """Return README.md content, or the short description when there is no README."""
    if README_PATH.exists():
        return README_PATH.read_text(encoding='utf-8')
    return DESCRIPTION


def get_version_from_package() -> str:
    """
    Extracts the version string from the package constants module without importing it.

    Returns:
        str: Package version string from PACKAGE_VERSION

    Raises:
        RuntimeError: If PACKAGE_VERSION cannot be found
    """
    match = re.search(
        r'^PACKAGE_VERSION\s*=\s*["\']([^"\']+)["\']',
        CONSTANTS_PATH.read_text(encoding='utf-8'),
        re.MULTILINE,
    )
    if not match:
        raise RuntimeError(f"PACKAGE_VERSION not found in {CONSTANTS_PATH}")
    return match.group(1)


def setup_package():
    """
    Configures and executes setuptools.setup() with package metadata, dependencies,
    and the console entry point.
    """
    install_requires = read_requirements(REQUIREMENTS_PATH) or FALLBACK_INSTALL_REQUIRES
    test_requirements = read_requirements(DEV_REQUIREMENTS_PATH) or FALLBACK_TEST_REQUIRES

    setuptools.setup(
        name=PACKAGE_NAME,
        version=get_version_from_package(),
        description=DESCRIPTION,
        long_description=read_long_description(),
        long_description_content_type='text/markdown',
        author=AUTHOR,
        license=LICENSE,
        keywords=KEYWORDS,
        classifiers=CLASSIFIERS,
        packages=setuptools.find_packages(include=['toy_robot_sim', 'toy_robot_sim.*']),
        install_requires=install_requires,
        extras_require={
            'test': test_requirements,
            'dev': test_requirements,
        },
        entry_points={
            'console_scripts': [
                'toy-robot=toy_robot_sim.cli.run:main',
            ]
        },
        python_requires='>=3.10',
        zip_safe=False,
    )


if __name__ == '__main__':
    setup_package()
