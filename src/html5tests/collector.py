"""Token sink that records events in the html5lib tokenizer-test format.

Each event becomes one list, in arrival order::

    ["StartTag", name, {attr: value}]          (+ True when self-closing)
    ["EndTag", name]
    ["Comment", data]
    ["DOCTYPE", name, public_id, system_id, not force_quirks]
    ["Character", data]

End of input produces nothing. A collector is fed by a single tokenizer
run; it is not safe to deliver events from several threads.
"""

from __future__ import annotations

from typing import Any

from .tokens import CharacterTokens, CommentToken, Doctype, DoctypeToken, EOFToken, Tag, TokenSinkResult


class TokenCollector:
    __slots__ = ("tokens",)

    def __init__(self, tokens: list[list[Any]] | None = None) -> None:
        self.tokens: list[list[Any]] = tokens if tokens is not None else []

    def process_token(self, token: Any) -> int:
        if isinstance(token, Tag):
            self.process_tag(token)
        elif isinstance(token, CharacterTokens):
            self.process_characters(token.data)
        elif isinstance(token, CommentToken):
            self.process_comment(token)
        elif isinstance(token, DoctypeToken):
            self.process_doctype(token.doctype)
        elif isinstance(token, EOFToken):
            self.process_eof()
        else:
            msg = f"Unsupported token type: {type(token).__name__}"
            raise TypeError(msg)
        return TokenSinkResult.Continue

    def process_tag(self, tag: Tag) -> None:
        if tag.kind == Tag.START:
            attrs = {name: value if value is not None else "" for name, value in tag.attrs.items()}
            token: list[Any] = ["StartTag", tag.name, attrs]
            if tag.self_closing:
                token.append(True)
            self.tokens.append(token)
        else:
            self.tokens.append(["EndTag", tag.name])

    def process_comment(self, comment: CommentToken) -> None:
        self.tokens.append(["Comment", comment.data])

    def process_doctype(self, doctype: Doctype) -> None:
        self.tokens.append(
            ["DOCTYPE", doctype.name, doctype.public_id, doctype.system_id, not doctype.force_quirks]
        )

    def process_characters(self, data: str) -> None:
        self.tokens.append(["Character", data])

    def process_eof(self) -> None:
        pass
