import sys

from quadratic_solver.cli import main

if __name__ == "__main__":
    sys.exit(main())
