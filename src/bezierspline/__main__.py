"""
Run with: python -m bezierspline
"""
import sys

from bezierspline.main import main

if __name__ == "__main__":
    sys.exit(main())
