# Sphinx configuration for the objiterate documentation.
#
# Build with: sphinx-build -b html docs docs/_build/html

import os
import sys
sys.path.insert(0, os.path.abspath('..'))

from objiterate import __version__

# -- Project information -----------------------------------------------------

project = 'objiterate'
copyright = '2024, objiterate contributors'
author = 'objiterate contributors'
release = __version__
version = __version__

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- HTML output -------------------------------------------------------------

html_theme = 'sphinx_rtd_theme'

# -- Extensions --------------------------------------------------------------

# Docstrings use the Google style throughout
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_special_with_doc = True
napoleon_attr_annotations = True

autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'exclude-members': '__weakref__,__dataclass_fields__,__dataclass_params__,__match_args__,__post_init__'
}
autodoc_typehints = 'description'
autodoc_typehints_description_target = 'documented'

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
}
