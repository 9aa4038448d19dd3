"""Thread-safe: convert 1000 proposals in parallel with one shared LatexPreview."""

from concurrent.futures import ThreadPoolExecutor

from texpreview import LatexPreview

preview = LatexPreview(compiler_name="TeXLive", compiler_url="https://tug.org")
docs = [f"\\section{{Proposal {i}}}\nBudget request for project {i}." for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(preview, docs))

print(f"Converted {len(results)} documents in parallel")
print("First:", results[0])
print("Last:", results[-1])
