"""
Type aliases for cgetopt.

This module provides centralized type definitions used throughout the package
to keep the parser, the result container and the driver in agreement.

Type Aliases:
    ArgsList: List of string tokens
    OptionValue: Value recorded for an option (None for plain flags)
    OptionMap: Dictionary mapping prefixed option keys to their values
    LongSpec: Sequence of long option words
    TokenParts: Tuple of prefix, identifier and embedded value of a token
    SplitResult: Tuple of two token lists (before/after separator)
    ExitCode: Integer representing exit codes
"""

from typing import Dict, List, Optional, Sequence, Tuple

ArgsList = List[str]
"""List of string tokens (argv without the program name)."""

OptionValue = Optional[str]
"""Value of a parsed option, e.g. 'file.txt' for '-i file.txt' or None for '-h'."""

OptionMap = Dict[str, OptionValue]
"""Dictionary mapping prefixed option keys ('-i', '--input') to their values."""

LongSpec = Sequence[str]
"""Long option words, each optionally ending in '=' (e.g. ['help', 'input='])."""

TokenParts = Tuple[str, str, Optional[str]]
"""Lexical parts of an option token (prefix, identifier, embedded value)."""

SplitResult = Tuple[ArgsList, ArgsList]
"""Result of splitting tokens at separator (before, after)."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""
