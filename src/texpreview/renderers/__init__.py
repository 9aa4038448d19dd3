"""HTML renderers for texpreview.

Block renderers for buffered environments (tables, lists) and the fragment
builders the state machine emits directly.
"""

from texpreview.renderers.html import render_list, render_table

__all__ = ["render_list", "render_table"]
