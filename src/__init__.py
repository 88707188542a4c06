"""
Initializes the 'src' directory as a Python package.

This allows 'main.py' in the project root to import the application as
'src.sketchauth' without installing it.
"""
