import sys

from lazy_sequence.demo import main

if __name__ == "__main__":
    sys.exit(main())
