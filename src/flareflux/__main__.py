"""Allows ``python -m flareflux``."""
from flareflux.main import main

if __name__ == "__main__":
    main()
