"""Parser for html5lib-tests tree-construction fixtures (``.dat`` files).

A fixture holds any number of test cases. Each one starts with a ``#data``
line and is made of sections introduced by ``#<name>`` header lines::

    #data
    <p>Hello
    #errors
    (1,8): expected-doctype-but-got-start-tag
    #document
    | <html>
    |   <head>
    |   <body>
    |     <p>
    |       "Hello"

Malformed input never raises: unknown headers end the current case and
missing sections fall back to their defaults.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .escapes import decode_escapes

logger = logging.getLogger(__name__)


class ScriptDirective(str, enum.Enum):
    SCRIPT_OFF = "script-off"
    SCRIPT_ON = "script-on"


@dataclass(frozen=True, slots=True)
class TestCase:
    __test__ = False  # not a pytest test class

    data: str
    errors: tuple[str, ...]
    document: str
    document_fragment: str | None = None
    script_directive: ScriptDirective | None = None
    xml_coercion: bool = False
    iframe_srcdoc: bool = False

    @property
    def is_fragment(self) -> bool:
        return self.document_fragment is not None


def parse_tree_construction_tests(content: str) -> list[TestCase]:
    """Parse the text of a ``.dat`` fixture into test cases, in file order."""
    tests: list[TestCase] = []
    lines = content.split("\n")
    i = 0
    while i < len(lines):
        # Skip until the next #data header
        if lines[i] != "#data":
            i += 1
            continue
        test, i = _parse_single_test(lines, i + 1)
        tests.append(test)

    logger.debug("Parsed %d tree-construction test(s)", len(tests))
    return tests


def _parse_single_test(lines: list[str], i: int) -> tuple[TestCase, int]:
    """Parse one test case whose ``#data`` header sits just before line ``i``.

    Returns the test and the index of the first line not consumed.
    """
    data_lines: list[str] = []
    while i < len(lines) and not lines[i].startswith("#"):
        data_lines.append(lines[i])
        i += 1

    data = "\n".join(data_lines)
    # Drop one trailing newline left by a final empty line
    if data.endswith("\n") and data_lines[-1] == "":
        data = data[:-1]

    errors: list[str] = []
    document_lines: list[str] = []
    document_fragment = None
    script_directive = None
    xml_coercion = False
    iframe_srcdoc = False

    while i < len(lines):
        header = lines[i]
        i += 1
        if header == "#errors":
            while i < len(lines) and not lines[i].startswith("#"):
                if lines[i]:
                    errors.append(lines[i])
                i += 1
        elif header == "#new-errors":
            while i < len(lines) and not lines[i].startswith("#"):
                i += 1
        elif header == "#document-fragment":
            if i < len(lines) and not lines[i].startswith("#"):
                document_fragment = lines[i].strip()
                i += 1
        elif header == "#script-off":
            script_directive = ScriptDirective.SCRIPT_OFF
        elif header == "#script-on":
            script_directive = ScriptDirective.SCRIPT_ON
        elif header == "#xml-coercion":
            xml_coercion = True
        elif header == "#iframe-srcdoc":
            iframe_srcdoc = True
        elif header == "#document":
            while i < len(lines) and lines[i] != "#data":
                document_lines.append(lines[i])
                i += 1
            break
        else:
            # Not a section we know: leave the line for the outer scan
            i -= 1
            logger.debug("Unrecognized section header %r ends test case", header)
            break

    while document_lines and document_lines[-1] == "":
        document_lines.pop()

    test = TestCase(
        data=decode_escapes(data),
        errors=tuple(errors),
        document="\n".join(document_lines),
        document_fragment=document_fragment,
        script_directive=script_directive,
        xml_coercion=xml_coercion,
        iframe_srcdoc=iframe_srcdoc,
    )
    return test, i
