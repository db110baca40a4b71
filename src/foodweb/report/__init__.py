"""
Plain-text rendering of the food web and its characteristics.
"""

from foodweb.report.renderer import render_web, render_report

__all__ = [
    "render_web",
    "render_report",
]
