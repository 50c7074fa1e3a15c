"""
Initializes the 'src' directory as a Python package.

This allows the 'fontpicker' package within 'src' to be imported as
`src.fontpicker` by scripts in the project's root directory, such as
'main.py', and by the test suite.
"""
