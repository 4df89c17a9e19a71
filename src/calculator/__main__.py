import sys

from src.calculator.app import main

if __name__ == "__main__":
    sys.exit(main())
