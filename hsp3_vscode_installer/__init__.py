"""Installer for the HSP3 VSCode extension.

Runs the extension's toolchain in a fixed order:
- Check that the package manager and editor CLI are installed
- Install the extension's dependencies
- Build the .vsix package
- Install the package into the editor

Every step's exit status is checked before the next one starts.
"""

__all__ = []
