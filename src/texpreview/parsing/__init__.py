"""Line-level parsing helpers for texpreview.

parsing/
├── inline.py        # Ordered inline command pipeline
├── placeholders.py  # MarkupStash shielding generated tags from escaping
├── symbols.py       # amsmath/amssymb symbol table
└── table.py         # Table row tokenizer, column spec counting
"""

from texpreview.parsing.inline import INLINE_STEPS, process_inline, run_step
from texpreview.parsing.table import conform_row, count_columns, parse_table_row

__all__ = [
    "INLINE_STEPS",
    "conform_row",
    "count_columns",
    "parse_table_row",
    "process_inline",
    "run_step",
]
