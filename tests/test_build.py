from pathlib import Path

from viewgen import build, elements, render


def test_elements_module_is_up_to_date():
    assert build.render_elements() == Path(elements.__file__).read_text(
        "utf-8")


def test_generated_code_defines_every_tag():
    namespace = {}
    exec(compile(build.render_elements(), "elements.py", "exec"), namespace)

    for tag, required, optional in build.ELEMENTS:
        factory = namespace[tag]
        assert render(factory("x")) == render(getattr(elements, tag)("x"))
        assert len(factory().required_specs) == len(required)
        assert len(factory().optional_specs) == len(optional)

    for tag, required, optional in build.VOID_ELEMENTS:
        assert render(namespace[tag]()) == render(getattr(elements, tag)())
        assert namespace[tag]().children is None


def test_attribute_methods():
    code = build.render_elements()
    assert "    def controls(self, value=True):\n" in code
    assert "    def poster(self, value):\n" in code
    assert 'AttributeSpec("controls", kind=BOOLEAN)' in code
    assert 'AttributeSpec("poster")' in code


def test_render_element_from_custom_template():
    template = 'class Div:\n    """<div>"""\n    required_attributes = ()\n'\
        '### ATTRIBUTES ###\nTAG = "div"\n'
    code = build.render_element(template, "div", "del_", ["cite"], [],
                                "    def cite(self):\n")
    assert code == 'class Del:\n    """<del>"""\n    required_attributes = '\
        '(\n        AttributeSpec("cite"),\n    )\n    def cite(self):\n'\
        'TAG = "del"\n'


def test_build_writes_elements(tmp_path, monkeypatch):
    (tmp_path / "_elements.py").write_text(
        (build.HERE / "_elements.py").read_text("utf-8"), "utf-8")
    monkeypatch.setattr(build, "HERE", tmp_path)
    build.build()
    assert (tmp_path / "elements.py").read_text("utf-8") == \
        Path(elements.__file__).read_text("utf-8")
