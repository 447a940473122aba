"""HTML element factories, one class and one function per tag.

elements.py is generated from the templates in _elements.py. Run
``python -m viewgen.build`` after changing them or the tag tables in build.py.
"""
from viewgen.core import BOOLEAN, AttributeSpec, ElementNode


class Html(ElementNode):
    """The <html> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("lang"),
    )

    def lang(self, value):
        return self.set_attribute("lang", value)


def html(*children, **attrs):
    return Html(
        "html", list(children), Html.required_attributes,
        Html.optional_attributes).set_attributes(**attrs)


class Head(ElementNode):
    """The <head> element."""

    required_attributes = ()
    optional_attributes = ()


def head(*children, **attrs):
    return Head(
        "head", list(children), Head.required_attributes,
        Head.optional_attributes).set_attributes(**attrs)


class Title(ElementNode):
    """The <title> element."""

    required_attributes = ()
    optional_attributes = ()


def title(*children, **attrs):
    return Title(
        "title", list(children), Title.required_attributes,
        Title.optional_attributes).set_attributes(**attrs)


class Body(ElementNode):
    """The <body> element."""

    required_attributes = ()
    optional_attributes = ()


def body(*children, **attrs):
    return Body(
        "body", list(children), Body.required_attributes,
        Body.optional_attributes).set_attributes(**attrs)


class Main(ElementNode):
    """The <main> element."""

    required_attributes = ()
    optional_attributes = ()


def main(*children, **attrs):
    return Main(
        "main", list(children), Main.required_attributes,
        Main.optional_attributes).set_attributes(**attrs)


class Nav(ElementNode):
    """The <nav> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("for_"),
    )

    def for_(self, value):
        return self.set_attribute("for_", value)


def nav(*children, **attrs):
    return Nav(
        "nav", list(children), Nav.required_attributes,
        Nav.optional_attributes).set_attributes(**attrs)


class Header(ElementNode):
    """The <header> element."""

    required_attributes = ()
    optional_attributes = ()


def header(*children, **attrs):
    return Header(
        "header", list(children), Header.required_attributes,
        Header.optional_attributes).set_attributes(**attrs)


class Footer(ElementNode):
    """The <footer> element."""

    required_attributes = ()
    optional_attributes = ()


def footer(*children, **attrs):
    return Footer(
        "footer", list(children), Footer.required_attributes,
        Footer.optional_attributes).set_attributes(**attrs)


class Section(ElementNode):
    """The <section> element."""

    required_attributes = ()
    optional_attributes = ()


def section(*children, **attrs):
    return Section(
        "section", list(children), Section.required_attributes,
        Section.optional_attributes).set_attributes(**attrs)


class Article(ElementNode):
    """The <article> element."""

    required_attributes = ()
    optional_attributes = ()


def article(*children, **attrs):
    return Article(
        "article", list(children), Article.required_attributes,
        Article.optional_attributes).set_attributes(**attrs)


class Div(ElementNode):
    """The <div> element."""

    required_attributes = ()
    optional_attributes = ()


def div(*children, **attrs):
    return Div(
        "div", list(children), Div.required_attributes,
        Div.optional_attributes).set_attributes(**attrs)


class Span(ElementNode):
    """The <span> element."""

    required_attributes = ()
    optional_attributes = ()


def span(*children, **attrs):
    return Span(
        "span", list(children), Span.required_attributes,
        Span.optional_attributes).set_attributes(**attrs)


class P(ElementNode):
    """The <p> element."""

    required_attributes = ()
    optional_attributes = ()


def p(*children, **attrs):
    return P(
        "p", list(children), P.required_attributes,
        P.optional_attributes).set_attributes(**attrs)


class B(ElementNode):
    """The <b> element."""

    required_attributes = ()
    optional_attributes = ()


def b(*children, **attrs):
    return B(
        "b", list(children), B.required_attributes,
        B.optional_attributes).set_attributes(**attrs)


class I(ElementNode):
    """The <i> element."""

    required_attributes = ()
    optional_attributes = ()


def i(*children, **attrs):
    return I(
        "i", list(children), I.required_attributes,
        I.optional_attributes).set_attributes(**attrs)


class Em(ElementNode):
    """The <em> element."""

    required_attributes = ()
    optional_attributes = ()


def em(*children, **attrs):
    return Em(
        "em", list(children), Em.required_attributes,
        Em.optional_attributes).set_attributes(**attrs)


class Strong(ElementNode):
    """The <strong> element."""

    required_attributes = ()
    optional_attributes = ()


def strong(*children, **attrs):
    return Strong(
        "strong", list(children), Strong.required_attributes,
        Strong.optional_attributes).set_attributes(**attrs)


class Code(ElementNode):
    """The <code> element."""

    required_attributes = ()
    optional_attributes = ()


def code(*children, **attrs):
    return Code(
        "code", list(children), Code.required_attributes,
        Code.optional_attributes).set_attributes(**attrs)


class Pre(ElementNode):
    """The <pre> element."""

    required_attributes = ()
    optional_attributes = ()


def pre(*children, **attrs):
    return Pre(
        "pre", list(children), Pre.required_attributes,
        Pre.optional_attributes).set_attributes(**attrs)


class H1(ElementNode):
    """The <h1> element."""

    required_attributes = ()
    optional_attributes = ()


def h1(*children, **attrs):
    return H1(
        "h1", list(children), H1.required_attributes,
        H1.optional_attributes).set_attributes(**attrs)


class H2(ElementNode):
    """The <h2> element."""

    required_attributes = ()
    optional_attributes = ()


def h2(*children, **attrs):
    return H2(
        "h2", list(children), H2.required_attributes,
        H2.optional_attributes).set_attributes(**attrs)


class H3(ElementNode):
    """The <h3> element."""

    required_attributes = ()
    optional_attributes = ()


def h3(*children, **attrs):
    return H3(
        "h3", list(children), H3.required_attributes,
        H3.optional_attributes).set_attributes(**attrs)


class H4(ElementNode):
    """The <h4> element."""

    required_attributes = ()
    optional_attributes = ()


def h4(*children, **attrs):
    return H4(
        "h4", list(children), H4.required_attributes,
        H4.optional_attributes).set_attributes(**attrs)


class H5(ElementNode):
    """The <h5> element."""

    required_attributes = ()
    optional_attributes = ()


def h5(*children, **attrs):
    return H5(
        "h5", list(children), H5.required_attributes,
        H5.optional_attributes).set_attributes(**attrs)


class H6(ElementNode):
    """The <h6> element."""

    required_attributes = ()
    optional_attributes = ()


def h6(*children, **attrs):
    return H6(
        "h6", list(children), H6.required_attributes,
        H6.optional_attributes).set_attributes(**attrs)


class A(ElementNode):
    """The <a> element."""

    required_attributes = (
        AttributeSpec("href"),
    )
    optional_attributes = (
        AttributeSpec("target"),
        AttributeSpec("rel"),
    )

    def href(self, value):
        return self.set_attribute("href", value)

    def target(self, value):
        return self.set_attribute("target", value)

    def rel(self, value):
        return self.set_attribute("rel", value)


def a(*children, **attrs):
    return A(
        "a", list(children), A.required_attributes,
        A.optional_attributes).set_attributes(**attrs)


class Ul(ElementNode):
    """The <ul> element."""

    required_attributes = ()
    optional_attributes = ()


def ul(*children, **attrs):
    return Ul(
        "ul", list(children), Ul.required_attributes,
        Ul.optional_attributes).set_attributes(**attrs)


class Ol(ElementNode):
    """The <ol> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("start"),
        AttributeSpec("reversed", kind=BOOLEAN),
    )

    def start(self, value):
        return self.set_attribute("start", value)

    def reversed(self, value=True):
        return self.set_attribute("reversed", value)


def ol(*children, **attrs):
    return Ol(
        "ol", list(children), Ol.required_attributes,
        Ol.optional_attributes).set_attributes(**attrs)


class Li(ElementNode):
    """The <li> element."""

    required_attributes = ()
    optional_attributes = ()


def li(*children, **attrs):
    return Li(
        "li", list(children), Li.required_attributes,
        Li.optional_attributes).set_attributes(**attrs)


class Table(ElementNode):
    """The <table> element."""

    required_attributes = ()
    optional_attributes = ()


def table(*children, **attrs):
    return Table(
        "table", list(children), Table.required_attributes,
        Table.optional_attributes).set_attributes(**attrs)


class Thead(ElementNode):
    """The <thead> element."""

    required_attributes = ()
    optional_attributes = ()


def thead(*children, **attrs):
    return Thead(
        "thead", list(children), Thead.required_attributes,
        Thead.optional_attributes).set_attributes(**attrs)


class Tbody(ElementNode):
    """The <tbody> element."""

    required_attributes = ()
    optional_attributes = ()


def tbody(*children, **attrs):
    return Tbody(
        "tbody", list(children), Tbody.required_attributes,
        Tbody.optional_attributes).set_attributes(**attrs)


class Tr(ElementNode):
    """The <tr> element."""

    required_attributes = ()
    optional_attributes = ()


def tr(*children, **attrs):
    return Tr(
        "tr", list(children), Tr.required_attributes,
        Tr.optional_attributes).set_attributes(**attrs)


class Th(ElementNode):
    """The <th> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("colspan"),
        AttributeSpec("rowspan"),
    )

    def colspan(self, value):
        return self.set_attribute("colspan", value)

    def rowspan(self, value):
        return self.set_attribute("rowspan", value)


def th(*children, **attrs):
    return Th(
        "th", list(children), Th.required_attributes,
        Th.optional_attributes).set_attributes(**attrs)


class Td(ElementNode):
    """The <td> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("colspan"),
        AttributeSpec("rowspan"),
    )

    def colspan(self, value):
        return self.set_attribute("colspan", value)

    def rowspan(self, value):
        return self.set_attribute("rowspan", value)


def td(*children, **attrs):
    return Td(
        "td", list(children), Td.required_attributes,
        Td.optional_attributes).set_attributes(**attrs)


class Form(ElementNode):
    """The <form> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("action"),
        AttributeSpec("method"),
    )

    def action(self, value):
        return self.set_attribute("action", value)

    def method(self, value):
        return self.set_attribute("method", value)


def form(*children, **attrs):
    return Form(
        "form", list(children), Form.required_attributes,
        Form.optional_attributes).set_attributes(**attrs)


class Label(ElementNode):
    """The <label> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("for_"),
    )

    def for_(self, value):
        return self.set_attribute("for_", value)


def label(*children, **attrs):
    return Label(
        "label", list(children), Label.required_attributes,
        Label.optional_attributes).set_attributes(**attrs)


class Button(ElementNode):
    """The <button> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("type"),
        AttributeSpec("name"),
        AttributeSpec("value"),
        AttributeSpec("onclick"),
        AttributeSpec("disabled", kind=BOOLEAN),
    )

    def type(self, value):
        return self.set_attribute("type", value)

    def name(self, value):
        return self.set_attribute("name", value)

    def value(self, value):
        return self.set_attribute("value", value)

    def onclick(self, value):
        return self.set_attribute("onclick", value)

    def disabled(self, value=True):
        return self.set_attribute("disabled", value)


def button(*children, **attrs):
    return Button(
        "button", list(children), Button.required_attributes,
        Button.optional_attributes).set_attributes(**attrs)


class Select(ElementNode):
    """The <select> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("name"),
        AttributeSpec("multiple", kind=BOOLEAN),
        AttributeSpec("disabled", kind=BOOLEAN),
    )

    def name(self, value):
        return self.set_attribute("name", value)

    def multiple(self, value=True):
        return self.set_attribute("multiple", value)

    def disabled(self, value=True):
        return self.set_attribute("disabled", value)


def select(*children, **attrs):
    return Select(
        "select", list(children), Select.required_attributes,
        Select.optional_attributes).set_attributes(**attrs)


class Option(ElementNode):
    """The <option> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("value"),
        AttributeSpec("selected", kind=BOOLEAN),
        AttributeSpec("disabled", kind=BOOLEAN),
    )

    def value(self, value):
        return self.set_attribute("value", value)

    def selected(self, value=True):
        return self.set_attribute("selected", value)

    def disabled(self, value=True):
        return self.set_attribute("disabled", value)


def option(*children, **attrs):
    return Option(
        "option", list(children), Option.required_attributes,
        Option.optional_attributes).set_attributes(**attrs)


class Textarea(ElementNode):
    """The <textarea> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("name"),
        AttributeSpec("rows"),
        AttributeSpec("cols"),
        AttributeSpec("placeholder"),
        AttributeSpec("readonly", kind=BOOLEAN),
    )

    def name(self, value):
        return self.set_attribute("name", value)

    def rows(self, value):
        return self.set_attribute("rows", value)

    def cols(self, value):
        return self.set_attribute("cols", value)

    def placeholder(self, value):
        return self.set_attribute("placeholder", value)

    def readonly(self, value=True):
        return self.set_attribute("readonly", value)


def textarea(*children, **attrs):
    return Textarea(
        "textarea", list(children), Textarea.required_attributes,
        Textarea.optional_attributes).set_attributes(**attrs)


class Video(ElementNode):
    """The <video> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("controls", kind=BOOLEAN),
        AttributeSpec("poster"),
        AttributeSpec("preload"),
        AttributeSpec("autoplay", kind=BOOLEAN),
        AttributeSpec("loop", kind=BOOLEAN),
        AttributeSpec("muted", kind=BOOLEAN),
    )

    def controls(self, value=True):
        return self.set_attribute("controls", value)

    def poster(self, value):
        return self.set_attribute("poster", value)

    def preload(self, value):
        return self.set_attribute("preload", value)

    def autoplay(self, value=True):
        return self.set_attribute("autoplay", value)

    def loop(self, value=True):
        return self.set_attribute("loop", value)

    def muted(self, value=True):
        return self.set_attribute("muted", value)


def video(*children, **attrs):
    return Video(
        "video", list(children), Video.required_attributes,
        Video.optional_attributes).set_attributes(**attrs)


class Script(ElementNode):
    """The <script> element."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("src"),
        AttributeSpec("type"),
        AttributeSpec("defer", kind=BOOLEAN),
        AttributeSpec("async_", kind=BOOLEAN),
    )

    def src(self, value):
        return self.set_attribute("src", value)

    def type(self, value):
        return self.set_attribute("type", value)

    def defer(self, value=True):
        return self.set_attribute("defer", value)

    def async_(self, value=True):
        return self.set_attribute("async_", value)


def script(*children, **attrs):
    return Script(
        "script", list(children), Script.required_attributes,
        Script.optional_attributes).set_attributes(**attrs)


class Img(ElementNode):
    """The <img> element, always self-closing."""

    required_attributes = (
        AttributeSpec("src"),
        AttributeSpec("alt"),
    )
    optional_attributes = (
        AttributeSpec("loading"),
        AttributeSpec("width"),
        AttributeSpec("height"),
    )

    def src(self, value):
        return self.set_attribute("src", value)

    def alt(self, value):
        return self.set_attribute("alt", value)

    def loading(self, value):
        return self.set_attribute("loading", value)

    def width(self, value):
        return self.set_attribute("width", value)

    def height(self, value):
        return self.set_attribute("height", value)


def img(**attrs):
    return Img(
        "img", None, Img.required_attributes,
        Img.optional_attributes).set_attributes(**attrs)


class Source(ElementNode):
    """The <source> element, always self-closing."""

    required_attributes = (
        AttributeSpec("src"),
        AttributeSpec("type"),
    )
    optional_attributes = ()

    def src(self, value):
        return self.set_attribute("src", value)

    def type(self, value):
        return self.set_attribute("type", value)


def source(**attrs):
    return Source(
        "source", None, Source.required_attributes,
        Source.optional_attributes).set_attributes(**attrs)


class Input(ElementNode):
    """The <input> element, always self-closing."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("type"),
        AttributeSpec("name"),
        AttributeSpec("value"),
        AttributeSpec("placeholder"),
        AttributeSpec("checked", kind=BOOLEAN),
        AttributeSpec("disabled", kind=BOOLEAN),
        AttributeSpec("required", kind=BOOLEAN),
    )

    def type(self, value):
        return self.set_attribute("type", value)

    def name(self, value):
        return self.set_attribute("name", value)

    def value(self, value):
        return self.set_attribute("value", value)

    def placeholder(self, value):
        return self.set_attribute("placeholder", value)

    def checked(self, value=True):
        return self.set_attribute("checked", value)

    def disabled(self, value=True):
        return self.set_attribute("disabled", value)

    def required(self, value=True):
        return self.set_attribute("required", value)


def input_(**attrs):
    return Input(
        "input", None, Input.required_attributes,
        Input.optional_attributes).set_attributes(**attrs)


class Link(ElementNode):
    """The <link> element, always self-closing."""

    required_attributes = (
        AttributeSpec("rel"),
        AttributeSpec("href"),
    )
    optional_attributes = (
        AttributeSpec("type"),
    )

    def rel(self, value):
        return self.set_attribute("rel", value)

    def href(self, value):
        return self.set_attribute("href", value)

    def type(self, value):
        return self.set_attribute("type", value)


def link(**attrs):
    return Link(
        "link", None, Link.required_attributes,
        Link.optional_attributes).set_attributes(**attrs)


class Meta(ElementNode):
    """The <meta> element, always self-closing."""

    required_attributes = ()
    optional_attributes = (
        AttributeSpec("name"),
        AttributeSpec("http_equiv"),
        AttributeSpec("content"),
        AttributeSpec("charset"),
    )

    def name(self, value):
        return self.set_attribute("name", value)

    def http_equiv(self, value):
        return self.set_attribute("http_equiv", value)

    def content(self, value):
        return self.set_attribute("content", value)

    def charset(self, value):
        return self.set_attribute("charset", value)


def meta(**attrs):
    return Meta(
        "meta", None, Meta.required_attributes,
        Meta.optional_attributes).set_attributes(**attrs)


class Br(ElementNode):
    """The <br> element, always self-closing."""

    required_attributes = ()
    optional_attributes = ()


def br(**attrs):
    return Br(
        "br", None, Br.required_attributes,
        Br.optional_attributes).set_attributes(**attrs)


class Hr(ElementNode):
    """The <hr> element, always self-closing."""

    required_attributes = ()
    optional_attributes = ()


def hr(**attrs):
    return Hr(
        "hr", None, Hr.required_attributes,
        Hr.optional_attributes).set_attributes(**attrs)
