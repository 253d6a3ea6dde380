"""Run with: python -m pointtrigger"""
import sys

from pointtrigger.main import main

if __name__ == "__main__":
    sys.exit(main())
