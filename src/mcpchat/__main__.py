"""Allow ``python -m mcpchat``."""

from mcpchat.cli import main

if __name__ == "__main__":
    main()
