"""HTML element factories, one class and one function per tag.

elements.py is generated from the templates in _elements.py. Run
``python -m viewgen.build`` after changing them or the tag tables in build.py.
"""
from viewgen.core import BOOLEAN, AttributeSpec, ElementNode

### TEMPLATE-ELEMENT ###


class Div(ElementNode):
    """The <div> element."""

    required_attributes = ()
    optional_attributes = ()
### ATTRIBUTES ###


def div(*children, **attrs):
    return Div(
        "div", list(children), Div.required_attributes,
        Div.optional_attributes).set_attributes(**attrs)
### TEMPLATE-ELEMENT ###
### TEMPLATE-VOID-ELEMENT ###


class Link(ElementNode):
    """The <link> element, always self-closing."""

    required_attributes = ()
    optional_attributes = ()
### ATTRIBUTES ###


def link(**attrs):
    return Link(
        "link", None, Link.required_attributes,
        Link.optional_attributes).set_attributes(**attrs)
### TEMPLATE-VOID-ELEMENT ###


class _Attributes(ElementNode):
    """Per-attribute method templates."""
### TEMPLATE-VALUE-ATTRIBUTE ###
    def lang(self, value):
        return self.set_attribute("lang", value)
### TEMPLATE-VALUE-ATTRIBUTE ###
### TEMPLATE-BOOLEAN-ATTRIBUTE ###
    def inert(self, value=True):
        return self.set_attribute("inert", value)
### TEMPLATE-BOOLEAN-ATTRIBUTE ###
