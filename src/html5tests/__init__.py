import logging

from .collector import TokenCollector
from .dat import ScriptDirective, TestCase, parse_tree_construction_tests
from .escapes import decode_escapes
from .node import CommentNode, DoctypeNode, Document, DocumentFragment, Element, TextNode
from .report import format_token_failure, format_tree_failure
from .serialize import to_test_format
from .tokenizer_tests import FixtureError, TokenizerTestCase, concatenate_character_tokens, parse_tokenizer_tests

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CommentNode",
    "DoctypeNode",
    "Document",
    "DocumentFragment",
    "Element",
    "FixtureError",
    "ScriptDirective",
    "TestCase",
    "TextNode",
    "TokenCollector",
    "TokenizerTestCase",
    "concatenate_character_tokens",
    "decode_escapes",
    "format_token_failure",
    "format_tree_failure",
    "parse_tokenizer_tests",
    "parse_tree_construction_tests",
    "to_test_format",
]
