"""
condition-tree entry point.

Usage:
    python -m condition_tree [--strategy iterative] [--config PATH] [-v]
"""

import sys

from condition_tree.demo import main

if __name__ == "__main__":
    sys.exit(main())
