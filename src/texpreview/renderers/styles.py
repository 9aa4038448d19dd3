"""Inline CSS used by the generated HTML.

The preview is dropped into a host page as a fragment, so every element
carries its own style attribute instead of relying on a stylesheet.
"""

TITLE = "font-size: 1.8rem; font-weight: bold; text-align: center; margin-bottom: 1.5rem;"
AUTHOR = "text-align: center; font-size: 1.2rem; margin-bottom: 1rem;"
DATE = "text-align: center; font-size: 1.2rem; margin-bottom: 1.5rem;"
TITLE_BLOCK = "text-align: center; margin-bottom: 2rem;"

ABSTRACT = "font-style: italic; margin-bottom: 1.5rem;"
SECTION_HEADING = "font-size: 1.4rem; font-weight: bold; margin-top: 1.5rem; margin-bottom: 0.5rem;"
SUBSECTION_HEADING = "font-size: 1.2rem; font-weight: bold; margin-top: 1rem; margin-bottom: 0.5rem;"
PARAGRAPH = "margin-bottom: 1rem;"

REFERENCES_LIST = "margin-top: 0.5rem;"
REFERENCE_ITEM = "margin-bottom: 0.5rem;"

EQUATION = "text-align: center; margin: 1rem 0;"
FIGURE = "text-align: center; margin: 1.5rem 0;"
FIGCAPTION = "font-size: 0.9rem; color: #666; margin-top: 0.5rem;"

TABLE = "width: 100%; border-collapse: collapse; margin: 1rem 0;"
HEADER_CELL = (
    "border: 1px solid #e2e8f0; padding: 0.5rem; text-align: left; "
    "font-weight: bold; background-color: #f7fafc;"
)
DATA_CELL = "border: 1px solid #e2e8f0; padding: 0.5rem; text-align: left;"

LIST = "margin-left: 2rem; margin-bottom: 1rem;"

PREVIEW_CONTAINER = (
    "font-family: 'Times New Roman', Times, serif; font-size: 12pt; line-height: 1.5; "
    "text-align: justify; max-width: 800px; margin: 0 auto; padding: 2rem; "
    "background: #fff; border: 1px solid #e2e8f0; border-radius: 0.5rem; "
    "box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); max-height: 600px; overflow-y: auto;"
)

ERROR_MESSAGE = "color: #e53e3e; text-align: center; font-size: 1rem; margin-top: 1rem;"
COMPILER_LINK_CLASS = "text-blue-600 hover:underline"
