"""
Setup script for typos-installer
"""

from setuptools import setup, find_packages
import os

# Read the README file
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# Read version from __version__.py without importing the package
version_file = {}
with open(os.path.join(here, 'src', 'typos_installer', '__version__.py'), encoding='utf-8') as f:
    exec(f.read(), version_file)

setup(
    name='typos-installer',
    version=version_file['__version__'],
    description='Post-install step that fetches the prebuilt typos spell checker binary',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Your Name',
    author_email='your.email@example.com',
    url='https://github.com/pedroanisio/typos-installer',
    license='MIT',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Quality Assurance',
        'Topic :: System :: Installation/Setup',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: POSIX :: Linux',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: Microsoft :: Windows',
    ],
    keywords='typos spell-check binary installer release download',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'requests>=2.25',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'black>=22.0',
            'flake8>=5.0',
            'mypy>=1.0',
            'isort>=5.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'typos-install=typos_installer.cli:main',
            'typos=typos_installer.cli:run_typos',
        ],
    },
    project_urls={
        'Bug Reports': 'https://github.com/pedroanisio/typos-installer/issues',
        'Source': 'https://github.com/pedroanisio/typos-installer',
    },
)
