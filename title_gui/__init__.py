"""Tk front end for the fake title generator.

Rendering is split in two: ``views`` maps the application state to plain
view models (importable and testable without a display), ``components``
applies those view models to Tk widgets.
"""
