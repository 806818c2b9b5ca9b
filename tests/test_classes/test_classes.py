"""Tests for the component class registry."""

import pytest

from trellis import convert
from trellis.cascade import CascadeContext, resolve_tree
from trellis.classes import ComponentClasses
from trellis.errors import UnknownComponentClassError
from trellis.parser import parse_template
from trellis.stylesheet import parse_stylesheet


class _Button:
    def __init__(self, attributes):
        self.text = attributes.attribute("text", convert.to_string, "")
        self.size = attributes.attribute("size", convert.to_vector2, (84.0, 24.0))


class TestRegistry:
    def test_register_and_create(self):
        classes = ComponentClasses()
        classes.register("button", _Button)
        template = parse_template('button { text: "Save" }\n')
        context = CascadeContext(stylesheet=parse_stylesheet("button { size: (100, 30) }"))
        button = classes.create(resolve_tree(template, context).attributes)
        assert isinstance(button, _Button)
        assert button.text == "Save"
        assert button.size == (100.0, 30.0)

    def test_contains_and_names(self):
        classes = ComponentClasses()
        classes.register("button", _Button)
        classes.register("label", lambda attributes: attributes)
        assert "button" in classes
        assert "slider" not in classes
        assert classes.names == frozenset({"button", "label"})

    def test_register_replaces(self):
        classes = ComponentClasses()
        classes.register("x", lambda attributes: 1)
        classes.register("x", lambda attributes: 2)
        template = parse_template("x\n")
        assert classes.create(resolve_tree(template, CascadeContext()).attributes) == 2

    def test_unknown_class(self):
        classes = ComponentClasses()
        template = parse_template("root\n    slider\n")
        resolved = resolve_tree(template, CascadeContext())
        with pytest.raises(UnknownComponentClassError) as exc_info:
            classes.create(resolved.children[0].attributes)
        assert exc_info.value.component_class == "slider"
        assert exc_info.value.line == 2
