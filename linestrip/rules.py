"""
Deterministic stripping rules.

This file exists to make non-goals explicit and enforceable.
"""

LINE_DELIMITER = "\n"
ASCII_WHITESPACE = " \t\n\r\v\f"  # C isspace(), "C" locale; no Unicode spaces
OUTPUT_ENCODING = "utf-8"
TEXT_SUFFIXES = (".txt", ".md", ".log", ".csv")
