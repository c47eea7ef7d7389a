#!/usr/bin/env python3
"""Run the fake title widget from a source checkout.

Installed copies get the same thing through the ``fake-title-gui`` command.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from title_gui.app import main  # noqa: E402

if __name__ == "__main__":
    main()
