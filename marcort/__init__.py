"""Runtime support for compiled equation-based models: types, options,
scalar and array built-ins, printing and memory helpers."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "array_functions",
    "elementary",
    "memory",
    "options",
    "power",
    "printing",
    "types",
    "utility",
]