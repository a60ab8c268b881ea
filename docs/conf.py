# Sphinx configuration for lamb
import importlib.metadata
from datetime import datetime

project = "lamb"
author = "lamb contributors"
copyright = f"{datetime.now():%Y}, {author}"

try:
    release = version = importlib.metadata.version("lamb")
except importlib.metadata.PackageNotFoundError:
    release = version = "0.0.0"

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_autodoc_typehints",
]

autodoc_default_options = {
    "members": True,
    "undoc-members": True,
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_param = True

exclude_patterns = [
    "_build",
    "Thumbs.db",
    ".DS_Store",
]

html_theme = "furo"

myst_heading_anchors = 3
