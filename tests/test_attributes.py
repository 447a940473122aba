import pytest

from viewgen import (BOOLEAN, VALUE, AttributeSpec, MissingDefault, ViewError,
                     element, render_attribute, render_attribute_list,
                     render_common_attributes, render_global_attributes,
                     switch_case, text)


def test_absent_value_renders_nothing():
    assert render_attribute("href") == ""
    assert render_attribute("href", None, VALUE) == ""
    assert render_attribute("controls", None, BOOLEAN) == ""


def test_value_attribute():
    assert render_attribute("href", "https://x.test") == 'href="https://x.test"'
    assert render_attribute("width", 640) == 'width="640"'


def test_empty_string_is_not_absent():
    assert render_attribute("alt", "") == 'alt=""'


def test_boolean_attribute_ignores_truthiness():
    assert render_attribute("controls", True, BOOLEAN) == "controls"
    assert render_attribute("controls", False, BOOLEAN) == "controls"
    assert render_attribute("controls", "", BOOLEAN) == "controls"


def test_unknown_kind_falls_back_to_nothing():
    assert render_attribute("x", 1, "unknown") == ""


def test_value_is_not_escaped():
    assert render_attribute("onclick", 'go("a")') == 'onclick="go("a")"'


def test_attribute_list_keeps_order_and_drops_absent():
    specs = [
        AttributeSpec("src", "a.png"),
        AttributeSpec("alt"),
        AttributeSpec("controls", True, BOOLEAN),
        AttributeSpec("loading", "lazy"),
    ]
    assert render_attribute_list(specs) == 'src="a.png" controls loading="lazy"'
    assert render_attribute_list([]) == ""
    assert render_attribute_list([AttributeSpec("alt")]) == ""


def test_attribute_spec_defaults_and_names():
    spec = AttributeSpec("data_user_id")
    assert spec.name == "data-user-id"
    assert spec.value is None
    assert spec.kind == VALUE
    assert AttributeSpec("class_").name == "class"
    assert AttributeSpec("for_", "x").value == "x"


def test_global_attributes_fixed_order():
    view = text("x").title("t").style("s").id("i").class_("c")
    assert render_global_attributes(view) == \
        'class="c" id="i" style="s" title="t"'


def test_global_attributes_partial():
    assert render_global_attributes(text("x")) == ""
    assert render_global_attributes(text("x").id("main")) == 'id="main"'


def test_common_attributes_explicit_before_global():
    view = text("x").class_("btn").id("go")
    specs = [AttributeSpec("href", "/"), AttributeSpec("rel")]
    assert render_common_attributes(view, specs) == \
        'href="/" class="btn" id="go"'
    assert render_common_attributes(view, specs, include_global=False) == \
        'href="/"'
    assert render_common_attributes(view) == 'class="btn" id="go"'
    assert render_common_attributes(text("x"), specs[1:]) == ""


def test_style_dict_is_flattened():
    view = element("div").style({"height": 42, "display": "none"})
    assert view.global_attributes.style == "height:42;display:none"
    view = element("div").set_attributes(style={"color": "red"})
    assert view.global_attributes.style == "color:red"


def test_set_attribute_routes_globals():
    node = element("div").set_attributes(class_="a", id="b", data_x=1)
    assert node.global_attributes.class_ == "a"
    assert node.global_attributes.id == "b"
    assert node.attributes == {"data-x": 1}


def test_inherit_global_attributes_copies():
    source = text("x").class_("card").title("tip")
    target = element("div").inherit_global_attributes(source)
    source.class_("changed")
    assert render_global_attributes(target) == 'class="card" title="tip"'


def test_switch_case_selects_and_falls_back():
    cases = {"a": 1, "b": "two"}
    assert switch_case("a", cases, None) == 1
    assert switch_case("b", cases, None) == "two"
    assert switch_case("c", cases, "default") == "default"


def test_switch_case_only_evaluates_selected_branch():
    cases = {"ok": lambda: "fine", "fails": lambda: 1 / 0}
    assert switch_case("ok", cases, "") == "fine"
    assert switch_case("missing", cases, lambda: "lazy") == "lazy"


def test_switch_case_keeps_falsy_selections():
    assert switch_case("empty", {"empty": ""}, "default") == ""
    assert switch_case("zero", {"zero": 0}, 1) == 0


def test_switch_case_requires_default():
    with pytest.raises(MissingDefault):
        switch_case("a", {"a": 1})
    assert issubclass(MissingDefault, ViewError)
    assert issubclass(MissingDefault, LookupError)
