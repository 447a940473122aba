"""Generates viewgen/elements.py from the templates in viewgen/_elements.py.

    python -m viewgen.build
"""
import logging
from pathlib import Path

from viewgen.core import html_name

log = logging.getLogger(__name__)

HERE = Path(__file__).parent
TEMPLATE = "### TEMPLATE-ELEMENT ###"
TEMPLATE_VOID = "### TEMPLATE-VOID-ELEMENT ###"
TEMPLATE_VALUE = "### TEMPLATE-VALUE-ATTRIBUTE ###"
TEMPLATE_BOOLEAN = "### TEMPLATE-BOOLEAN-ATTRIBUTE ###"
ATTRIBUTES = "### ATTRIBUTES ###\n"

BOOLEAN_ATTRIBUTES = {
    "async_", "autoplay", "checked", "controls", "defer", "disabled", "loop",
    "multiple", "muted", "readonly", "required", "reversed", "selected"
}

# (tag, required attributes, optional attributes)
ELEMENTS = [
    ("html", [], ["lang"]),
    ("head", [], []),
    ("title", [], []),
    ("body", [], []),
    ("main", [], []),
    ("nav", [], ["for_"]),
    ("header", [], []),
    ("footer", [], []),
    ("section", [], []),
    ("article", [], []),
    ("div", [], []),
    ("span", [], []),
    ("p", [], []),
    ("b", [], []),
    ("i", [], []),
    ("em", [], []),
    ("strong", [], []),
    ("code", [], []),
    ("pre", [], []),
    ("h1", [], []),
    ("h2", [], []),
    ("h3", [], []),
    ("h4", [], []),
    ("h5", [], []),
    ("h6", [], []),
    ("a", ["href"], ["target", "rel"]),
    ("ul", [], []),
    ("ol", [], ["start", "reversed"]),
    ("li", [], []),
    ("table", [], []),
    ("thead", [], []),
    ("tbody", [], []),
    ("tr", [], []),
    ("th", [], ["colspan", "rowspan"]),
    ("td", [], ["colspan", "rowspan"]),
    ("form", [], ["action", "method"]),
    ("label", [], ["for_"]),
    ("button", [], ["type", "name", "value", "onclick", "disabled"]),
    ("select", [], ["name", "multiple", "disabled"]),
    ("option", [], ["value", "selected", "disabled"]),
    ("textarea", [], ["name", "rows", "cols", "placeholder", "readonly"]),
    ("video", [], ["controls", "poster", "preload", "autoplay", "loop",
                   "muted"]),
    ("script", [], ["src", "type", "defer", "async_"]),
]

VOID_ELEMENTS = [
    ("img", ["src", "alt"], ["loading", "width", "height"]),
    ("source", ["src", "type"], []),
    ("input_", [], ["type", "name", "value", "placeholder", "checked",
                    "disabled", "required"]),
    ("link", ["rel", "href"], ["type"]),
    ("meta", [], ["name", "http_equiv", "content", "charset"]),
    ("br", [], []),
    ("hr", [], []),
]


def block(code, marker):
    return code.split(marker)[1].strip("\n")


def spec(name):
    if name in BOOLEAN_ATTRIBUTES:
        return 'AttributeSpec("{}", kind=BOOLEAN)'.format(name)
    else:
        return 'AttributeSpec("{}")'.format(name)


def spec_tuple(names):
    if not names:
        return "()"
    return "(\n{}    )".format("".join(
        "        {},\n".format(spec(x)) for x in names))


def render_methods(names, value_template, boolean_template):
    s = ""
    for name in names:
        if name in BOOLEAN_ATTRIBUTES:
            s += "\n" + boolean_template.replace("inert", name) + "\n"
        else:
            s += "\n" + value_template.replace("lang", name) + "\n"
    return s


def render_element(template, placeholder, tag, required, optional, methods):
    code = template.replace("<{}>".format(placeholder),
                            "<{}>".format(html_name(tag)))
    code = code.replace('"{}"'.format(placeholder),
                        '"{}"'.format(html_name(tag)))
    code = code.replace(placeholder, tag)
    code = code.replace(placeholder.capitalize(),
                        tag.rstrip("_").capitalize())
    code = code.replace("required_attributes = ()",
                        "required_attributes = " + spec_tuple(required))
    code = code.replace("optional_attributes = ()",
                        "optional_attributes = " + spec_tuple(optional))
    return code.replace(ATTRIBUTES, methods)


def render_elements(code=None):
    if code is None:
        code = (HERE / "_elements.py").read_text("utf-8")

    value_template = block(code, TEMPLATE_VALUE)
    boolean_template = block(code, TEMPLATE_BOOLEAN)
    parts = [code.split(TEMPLATE)[0].strip("\n")]

    for template, placeholder, table in (
        (block(code, TEMPLATE), "div", ELEMENTS),
        (block(code, TEMPLATE_VOID), "link", VOID_ELEMENTS),
    ):
        for tag, required, optional in table:
            methods = render_methods(required + optional, value_template,
                                     boolean_template)
            parts.append(
                render_element(template, placeholder, tag, required,
                               optional, methods))

    return "\n\n\n".join(parts) + "\n"


def build():
    path = HERE / "elements.py"
    path.write_text(render_elements(), "utf-8")
    log.info("Wrote %s", path)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    build()
