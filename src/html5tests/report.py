"""Failure reports for assertion messages."""

from __future__ import annotations

import json
from typing import Any

from .dat import TestCase
from .tokenizer_tests import TokenizerTestCase


def format_tree_failure(case: TestCase, actual: str) -> str:
    lines = [
        "FAILED:",
        f"=== INCOMING HTML ===\n{case.data}\n",
        f"Errors to handle when parsing: {list(case.errors)}\n",
    ]
    if case.document_fragment is not None:
        lines.append(f"Fragment context: {case.document_fragment}\n")
    if case.script_directive is not None:
        lines.append(f"Script directive: {case.script_directive.value}\n")
    lines.extend(
        [
            f"=== EXPECTED TREE ===\n{case.document}\n",
            f"=== ACTUAL TREE ===\n{actual}",
        ]
    )
    return "\n".join(lines)


def format_token_failure(case: TokenizerTestCase, actual: list[list[Any]]) -> str:
    lines = [
        f"FAILED: {case.description}",
        f"Initial states: {', '.join(case.initial_states)}",
        f"=== INPUT ===\n{case.input}\n",
        f"=== EXPECTED TOKENS ===\n{_dump_tokens(case.output)}\n",
        f"=== ACTUAL TOKENS ===\n{_dump_tokens(actual)}",
    ]
    return "\n".join(lines)


def _dump_tokens(tokens: list[list[Any]]) -> str:
    return "\n".join(json.dumps(token, ensure_ascii=False) for token in tokens)
