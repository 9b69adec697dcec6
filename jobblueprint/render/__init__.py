"""
Rendering subsystem.

Produces the HTML shown to the operator: the blueprint table with
feedback buttons, status and error messages, and the page that hosts
them.  All functions are pure; they never touch application state.
"""

from .html_table import render, render_error, render_message, render_page  # noqa: F401
