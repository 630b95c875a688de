from setuptools import setup, find_packages
import tinyforth

setup(
  name              = "tinyforth",
  description       = "tiny forth-like stack language",
  version           = tinyforth.__version__,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development :: Interpreters",
  ],
  keywords          = "forth stack language interpreter repl",
  packages          = find_packages(exclude = ["tests"]),
  entry_points      = { "console_scripts": ["tinyforth=tinyforth:main_"] },
  python_requires   = ">=3.8",
  install_requires  = ["pyparsing>=3.0", "regex"],
  extras_require    = { "test": ["coverage", "pytest"] },
)
