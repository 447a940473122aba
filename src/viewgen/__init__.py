from viewgen.core import (
    BOOLEAN, GLOBAL_ATTRIBUTES, VALUE, AttributeSpec, ElementNode,
    GlobalAttributes, MissingDefault, MissingImplementation, RepeatNode,
    TextLeaf, View, ViewError, element, flask_render, flask_view_route,
    for_each, html_name, render, render_attribute, render_attribute_list,
    render_common_attributes, render_global_attributes, switch_case, text)
