import sys
import os

# autodoc imports the package from the repository root
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

with open(os.path.join(os.path.dirname(__file__), '..', 'VERSION')) as infile:
    release = infile.read().strip()

project = 'Seatalloc'
copyright = '2026, Seatalloc authors'
author = 'Seatalloc authors'

extensions = [
    'sphinx.ext.autodoc',
    'recommonmark',
    'nbsphinx',
]

source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

autodoc_member_order = 'bysource'

templates_path = ['_templates']

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '**.ipynb_checkpoints']

html_theme = 'sphinxdoc'

html_static_path = ['_static']
