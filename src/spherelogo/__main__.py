"""Entry point for `python -m spherelogo`."""
from spherelogo.main import main

if __name__ == "__main__":
    main()
