"""Allow ``python -m pdfofficex``."""

from pdfofficex.cli import main

if __name__ == "__main__":
    main()
