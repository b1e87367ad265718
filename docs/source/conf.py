"""Sphinx documentation configuration for when."""

from __future__ import annotations

import os
import sys
from pathlib import Path

# -- Project information -----------------------------------------------------

project = "when"
copyright = "2026, The when developers"
author = "The when developers"

# -- General configuration ---------------------------------------------------

# Make package importable for autodoc (src layout)
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "src"))

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.autosectionlabel",
    "sphinx.ext.viewcode",
]

exclude_patterns: list[str] = []

# Avoid autosectionlabel collisions across pages
autosectionlabel_prefix_document = True

# Honor SOURCE_DATE_EPOCH when set (reproducible builds)
if os.environ.get("SOURCE_DATE_EPOCH"):
    today_fmt = "%Y-%m-%d"

autodoc_member_order = "bysource"

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
