import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

project = "heatmap"
copyright = "2025, Juan Torrente"
author = "Juan Torrente"
release = "0.1"
version = "0.1"

today_fmt = "%Y-%m-%d"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",  # for Google/Numpy-style docstrings
    "sphinx.ext.viewcode",
    "sphinx_autodoc_typehints",
]

napoleon_google_docstring = True
napoleon_numpy_docstring = True

templates_path = ["_templates"]
exclude_patterns = []

html_theme = "sphinx_rtd_theme"
