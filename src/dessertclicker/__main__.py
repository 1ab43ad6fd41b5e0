"""
Run with: python -m dessertclicker
"""
import sys

from dessertclicker.main import main

if __name__ == "__main__":
    sys.exit(main())
