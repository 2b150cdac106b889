"""
Development runner: starts the logo window straight from a source checkout,
without installing the package.

Usage:
    $ python run.py
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

if sys.platform == 'win32':
    # Own taskbar entry instead of grouping under python.exe
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID('SphereLogoGenerator.App')

from spherelogo.main import main  # noqa: E402

if __name__ == "__main__":
    main()
