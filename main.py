import sys

from kshell.shell import main

if __name__ == "__main__":
    sys.exit(main())
