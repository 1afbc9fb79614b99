"""
Main entry point script for the Alpha WebM converter.

Equivalent to the installed `alphawebm` command:

    python main.py clip1.mov "clip two.mov"
"""
from alphawebm.main import run

if __name__ == "__main__":
    run()
