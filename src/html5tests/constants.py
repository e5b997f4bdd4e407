from types import MappingProxyType

SVG_NAMESPACE_URI = "http://www.w3.org/2000/svg"
MATHML_NAMESPACE_URI = "http://www.w3.org/1998/Math/MathML"

# Element namespace -> prefix printed before the tag name in test output.
# HTML elements (namespace None or "html") get no prefix.
NAMESPACE_PREFIXES = MappingProxyType(
    {
        "svg": "svg",
        "math": "math",
        "mathml": "math",
        SVG_NAMESPACE_URI: "svg",
        MATHML_NAMESPACE_URI: "math",
    }
)

# Namespaced attributes on foreign elements are shown with a space instead of a colon.
FOREIGN_ATTRIBUTE_DISPLAY_NAMES = MappingProxyType(
    {
        "xlink:actuate": "xlink actuate",
        "xlink:arcrole": "xlink arcrole",
        "xlink:href": "xlink href",
        "xlink:role": "xlink role",
        "xlink:show": "xlink show",
        "xlink:title": "xlink title",
        "xlink:type": "xlink type",
        "xml:lang": "xml lang",
        "xml:space": "xml space",
        "xmlns:xlink": "xmlns xlink",
    }
)
