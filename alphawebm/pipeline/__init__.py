"""
This package contains the conversion pipeline of the Alpha WebM converter.

The pipeline takes the jobs cleared by the overwrite guard and runs each one
through encode, clean and swap, strictly one after another.
"""
