"""Tree value consumed by the test-format serializer.

The parser under test builds (or is adapted to) these nodes. Only a closed
set of kinds exists: document, document fragment, doctype, element, text
and comment.
"""

from __future__ import annotations


class Node:
    __slots__ = ("children", "parent")

    def __init__(self):
        self.children = []
        self.parent = None

    def append_child(self, child):
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child


class Document(Node):
    __slots__ = ()

    name = "#document"


class DocumentFragment(Node):
    __slots__ = ()

    name = "#document-fragment"


class DoctypeNode(Node):
    __slots__ = ("doctype_name", "public_id", "system_id")

    name = "!doctype"

    def __init__(self, doctype_name=None, public_id=None, system_id=None):
        super().__init__()
        self.doctype_name = doctype_name
        self.public_id = public_id
        self.system_id = system_id


class Element(Node):
    """An element in the HTML, SVG or MathML namespace.

    - name: local tag name, e.g. 'div' or 'path'
    - attrs: dict of attribute name to value (None means no value)
    - namespace: None or 'html' for HTML, 'svg' or 'math' for foreign content
    - template_content: DocumentFragment holding a template's contents
    """

    __slots__ = ("attrs", "name", "namespace", "template_content")

    def __init__(self, name, attrs=None, namespace=None):
        super().__init__()
        self.name = name
        self.attrs = attrs if attrs is not None else {}
        self.namespace = namespace
        # Only HTML templates own a content fragment
        if name == "template" and namespace in {None, "html"}:
            self.template_content = DocumentFragment()
        else:
            self.template_content = None

    def __repr__(self):
        if self.namespace in {None, "html"}:
            return f"<Element {self.name}>"
        return f"<Element {self.namespace} {self.name}>"


class TextNode(Node):
    __slots__ = ("data",)

    name = "#text"

    def __init__(self, data):
        super().__init__()
        self.data = data


class CommentNode(Node):
    __slots__ = ("data",)

    name = "#comment"

    def __init__(self, data):
        super().__init__()
        self.data = data
