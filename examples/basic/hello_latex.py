"""Convert a LaTeX fragment to preview HTML in 3 lines, no TeX install needed."""

from texpreview import apply_preview_styles, convert

html = convert("\\section{Hello}\nThe \\textbf{world} says \\(\\alpha + \\beta\\).")
print(apply_preview_styles(html))
