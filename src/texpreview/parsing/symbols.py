"""Symbol table for amsmath/amssymb commands.

Maps command names (without the backslash) to the Unicode character shown
in the preview. Lookups are O(1); the matching pattern is compiled once at
import time.
"""

import re

GREEK_LETTERS: dict[str, str] = {
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ϵ",
    "varepsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "vartheta": "ϑ",
    "iota": "ι",
    "kappa": "κ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "pi": "π",
    "rho": "ρ",
    "sigma": "σ",
    "tau": "τ",
    "upsilon": "υ",
    "phi": "ϕ",
    "varphi": "φ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
    "Gamma": "Γ",
    "Delta": "Δ",
    "Theta": "Θ",
    "Lambda": "Λ",
    "Xi": "Ξ",
    "Pi": "Π",
    "Sigma": "Σ",
    "Phi": "Φ",
    "Psi": "Ψ",
    "Omega": "Ω",
}

OPERATORS: dict[str, str] = {
    "sum": "∑",
    "int": "∫",
    "prod": "∏",
    "partial": "∂",
    "nabla": "∇",
    "infty": "∞",
    "pm": "±",
    "times": "×",
    "cdot": "·",
    "leq": "≤",
    "geq": "≥",
    "neq": "≠",
    "approx": "≈",
    "sim": "∼",
    "propto": "∝",
    "in": "∈",
    "forall": "∀",
    "exists": "∃",
    "rightarrow": "→",
    "leftarrow": "←",
    "Rightarrow": "⇒",
    "to": "→",
}

SYMBOLS: dict[str, str] = {**GREEK_LETTERS, **OPERATORS}

# A name must not run into further letters: \int is not \integral, \in is not \infty.
SYMBOL_PATTERN = re.compile(
    r"\\(" + "|".join(sorted(SYMBOLS, key=len, reverse=True)) + r")(?![A-Za-z])"
)


def replace_symbols(text: str) -> str:
    """Replace every known symbol command with its Unicode character.

    Example:
        >>> replace_symbols(r"\\alpha + \\beta \\leq \\infty")
        'α + β ≤ ∞'
    """
    return SYMBOL_PATTERN.sub(lambda m: SYMBOLS[m.group(1)], text)
