#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of globmatch

Shows single-pattern matching, validation, and the multi-pattern helpers
used for include/exclude style filtering.
"""
import sys
sys.path.insert(0, "../src")

from globmatch import ValidationError, filter_texts, match, match_all, match_any, validate

print("=" * 80)
print("QUICK START EXAMPLES")
print("=" * 80)

# ============================================================================
# EXAMPLE 1: Single pattern
# ============================================================================
print("\nEXAMPLE 1: Single pattern")
for pattern, text in [("*.zig", "main.zig"), ("Letter[0-9]", "Letter10"), ("!*.tmp", "notes.txt")]:
    print(f"  match({pattern!r}, {text!r}) -> {match(pattern, text)}")

# ============================================================================
# EXAMPLE 2: Validation is opt-in
# ============================================================================
print("\nEXAMPLE 2: Validation")
for pattern in ["[a-z]*", "[abc", "[]", "test\\"]:
    try:
        validate(pattern)
        print(f"  {pattern!r}: ok")
    except ValidationError as exc:
        print(f"  {pattern!r}: {exc.kind.value} at {exc.position} (match still returns {match(pattern, 'a')})")

# ============================================================================
# EXAMPLE 3: Pattern lists
# ============================================================================
print("\nEXAMPLE 3: Pattern lists")
sources = ["*.zig", "*.c", "*.h"]
files = ["main.zig", "util.c", "script.py", "test_main.zig"]
print(f"  any of {sources}: {filter_texts(sources, files)}")
print(f"  match_any(sources, 'script.py') -> {match_any(sources, 'script.py')}")
print(f"  match_all(['test_*', '*.zig'], 'test_main.zig') -> {match_all(['test_*', '*.zig'], 'test_main.zig')}")
