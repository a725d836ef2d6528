#!/usr/bin/env python3
# -*- coding: utf-8 -*-
r"""
Unused Image Finder for FrameMaker books:
1) Pick the folder that holds all of a book's images (it sits directly inside the project folder).
2) Paste FrameMaker's list of imported graphic references, one per line, e.g. "Graphics/screenshot.png @ 120 dpi 100".
3) Show Unused Images lists every file in the folder that no reference line mentions.

Unused files can then be moved to the Recycle Bin or to a quarantine folder.
"""

import gui
import os


def main():  # pragma: no cover - UI entry point
    if os.name == "nt":
        try:
            import ctypes  # DPI awareness for sharper UI on Windows
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except Exception:
            pass
    gui.main()


if __name__ == "__main__":
    main()
