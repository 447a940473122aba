# coding=utf-8
"""Declarative HTML views.

Views are plain objects built up with chained calls and turned into markup by
``render``. Content is a view, a scalar, None or any nesting of iterables of
those (lists, tuples, ranges, generators, map objects)::

    render(div(h1("Hello"), for_each([1, 2], p)).class_("box"))

Text is written verbatim, escaping untrusted input is up to the caller.
"""
import logging
from collections import namedtuple
from collections.abc import Iterable, Iterator
from functools import wraps
from threading import local

log = logging.getLogger(__name__)

### Globals ###

state = local()
VALUE = "value"
BOOLEAN = "boolean"
GLOBAL_ATTRIBUTES = ("class", "id", "style", "title")
DEFAULT_OPTIONS = dict(sep="", void_close="/>")
MISSING = object()

### Errors ###


class ViewError(Exception):
    pass


class MissingImplementation(ViewError, NotImplementedError):
    pass


class MissingDefault(ViewError, LookupError):
    pass


def switch_case(key, cases, default=MISSING):
    """Picks ``cases[key]``, falling back to ``default``.

    A callable selection is called and its result returned, so branches that
    can fail should be given as lambdas. The default must always be passed.
    """
    if default is MISSING:
        raise MissingDefault("Default case for switch_case not provided!")

    selected = cases[key] if key in cases else default

    return selected() if callable(selected) else selected


### Control ###


def render(content, **options):
    unknown = set(options) - set(DEFAULT_OPTIONS)
    if unknown:
        raise TypeError("Unknown render options: {}".format(", ".join(
            sorted(unknown))))

    previous = getattr(state, "options", None)
    try:
        state.options = dict(DEFAULT_OPTIONS, **options)
        into = []
        _render(content, into)
        html = "".join(into)
    finally:
        state.options = previous

    log.debug("Rendered %s into %d characters", type(content).__name__,
              len(html))

    return html


### Rendering, internal API ###


def _render(content, into):
    if content is None:
        return
    elif isinstance(content, View):
        _render_view(content, into)
    elif isinstance(content, (str, bytes)):
        into.append(_text(content))
    elif isinstance(content, Iterable):
        sep = state.options["sep"]
        first = True
        for x in content:
            if x is None:
                continue
            if sep and not first:
                into.append(sep)
            first = False
            _render(x, into)
    else:
        into.append(_text(content))


def _text(value):
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _render_view(view, into):
    if isinstance(view, ElementNode):
        _render_element(view, into)
    elif isinstance(view, RepeatNode):
        _render([view.to_view(x) for x in view.elements], into)
    elif isinstance(view, TextLeaf):
        if view.value is not None:
            into.append(_text(view.value))
    else:
        _render(view.body(), into)


def _render_element(node, into):
    e = into.extend
    attrs = render_common_attributes(node, node.attribute_specs())

    e(("<", node.tag))
    if attrs:
        e((" ", attrs))
    if node.children is None:
        into.append(state.options["void_close"])
        return

    into.append(">")
    _render(node.children, into)
    e(("</", node.tag, ">"))


### Attributes ###


def html_name(name):
    return name.rstrip("_").replace("_", "-")


class AttributeSpec(namedtuple("AttributeSpec", ["name", "value", "kind"])):
    __slots__ = ()

    def __new__(cls, name, value=None, kind=VALUE):
        return super().__new__(cls, html_name(name), value, kind)


def render_attribute(name, value=None, kind=VALUE):
    if value is None:
        return ""

    return switch_case(kind, {
        VALUE: lambda: '{}="{}"'.format(name, value),
        BOOLEAN: name,
    }, "")


def render_attribute_list(specs):
    return " ".join(x for x in (render_attribute(*spec) for spec in specs)
                    if x)


def render_global_attributes(view):
    return render_attribute_list(view.global_attributes.specs())


def render_common_attributes(view, specs=(), include_global=True):
    return " ".join(x for x in (
        render_attribute_list(specs),
        render_global_attributes(view) if include_global else "",
    ) if x)


def _extra_spec(name, value):
    # Undeclared attributes have no kind, so it is taken from the value.
    if value is True:
        return AttributeSpec(name, value, BOOLEAN)
    elif value is False:
        return AttributeSpec(name)
    else:
        return AttributeSpec(name, value)


def _style(value):
    if isinstance(value, dict):
        return ";".join("{}:{}".format(k, v) for k, v in value.items())
    else:
        return value


class GlobalAttributes:
    """The class, id, style and title every view carries."""
    __slots__ = ("class_", "id", "style", "title")

    def __init__(self, class_=None, id=None, style=None, title=None):
        self.class_ = class_
        self.id = id
        self.style = style
        self.title = title

    def copy(self):
        return GlobalAttributes(self.class_, self.id, self.style, self.title)

    def specs(self):
        return [
            AttributeSpec(name, getattr(self, slot))
            for name, slot in zip(GLOBAL_ATTRIBUTES, self.__slots__)
        ]


GLOBAL_SLOTS = dict(zip(GLOBAL_ATTRIBUTES, GlobalAttributes.__slots__))

### Views ###


class View:
    """Base of everything ``render`` knows how to draw.

    Subclasses other than the element, repeat and text nodes describe
    themselves by returning content from ``body``.
    """

    def __init__(self):
        self.global_attributes = GlobalAttributes()
        self.attributes = {}

    def body(self):
        raise MissingImplementation(
            "Implementation of body() missing at {}!".format(
                type(self).__name__))

    def set_attribute(self, name, value):
        name = html_name(name)
        if name == "style":
            value = _style(value)
        if name in GLOBAL_SLOTS:
            setattr(self.global_attributes, GLOBAL_SLOTS[name], value)
        else:
            self.attributes[name] = value

        return self

    def set_attributes(self, **attrs):
        for k, v in attrs.items():
            self.set_attribute(k, v)

        return self

    def class_(self, value):
        return self.set_attribute("class", value)

    def id(self, value):
        return self.set_attribute("id", value)

    def style(self, value):
        return self.set_attribute("style", value)

    def title(self, value):
        return self.set_attribute("title", value)

    def inherit_global_attributes(self, view):
        self.global_attributes = view.global_attributes.copy()
        return self


class ElementNode(View):
    """One HTML tag. ``children=None`` renders the self-closing form."""

    def __init__(self, tag, children=None, required=(), optional=()):
        super().__init__()
        self.tag = html_name(tag)
        self.children = children
        self.required_specs = tuple(required)
        self.optional_specs = tuple(optional)

    def set_children(self, children):
        self.children = children
        return self

    def attribute_specs(self):
        """Declared specs with their current values, then undeclared ones."""
        declared = self.required_specs + self.optional_specs
        names = set(x.name for x in declared)
        specs = [
            x._replace(value=self.attributes.get(x.name, x.value))
            for x in declared
        ]
        specs.extend(
            _extra_spec(k, v) for k, v in self.attributes.items()
            if k not in names)

        return specs


class RepeatNode(View):
    def __init__(self, elements, to_view):
        super().__init__()
        # One-shot iterators are kept as a list so every render sees them.
        if isinstance(elements, Iterator):
            elements = list(elements)
        self.elements = elements
        self.to_view = to_view


class TextLeaf(View):
    def __init__(self, value):
        super().__init__()
        self.value = value


def element(tag, children=None, required=(), optional=()):
    return ElementNode(tag, children, required, optional)


def for_each(elements, to_view):
    """Renders ``to_view(x)`` for every x in elements, at render time."""
    return RepeatNode(elements, to_view)


def text(value):
    return TextLeaf(value)


### Flask helpers ###


def flask_render(content, status=200, **options):
    from flask import Response
    return Response(
        render(content, **options), status=status, mimetype="text/html")


def flask_view_route(app, path, *args, **kwargs):
    def _(f):
        @app.route(path, *args, **kwargs)
        @wraps(f)
        def __(*f_args, **f_kwargs):
            from werkzeug.wrappers import Response
            content = f(*f_args, **f_kwargs)
            if isinstance(content, Response):
                return content
            return flask_render(content)

        return __

    return _
