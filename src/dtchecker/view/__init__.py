"""Textual user interface for the date checker."""

import pathlib


CSS_FOLDER = pathlib.Path(__file__).parent.parent / "styles"
