"""Allow ``python -m sdkran``."""

from .version import main

if __name__ == "__main__":
    main()
