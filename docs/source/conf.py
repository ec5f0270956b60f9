import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "lowerkeys"
copyright = "2026, lowerkeys contributors"
author = "lowerkeys contributors"
import lowerkeys

release = lowerkeys.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports from lowerkeys/__init__.py produce duplicate references
suppress_warnings = ["ref.python"]

autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "both"
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "lowerkeys"
