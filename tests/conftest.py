import textwrap

import pytest

from option2class.parser import ScriptParser
from option2class.transformer.context import TransformContext


@pytest.fixture
def parser():
    return ScriptParser()


@pytest.fixture
def component_members(parser):
    """Parse a snippet; return a fresh context and the members of its `export default {}`."""

    def _members(source):
        source = textwrap.dedent(source)
        ast = parser.parse(source)
        ctx = TransformContext(source=source, file_uri="Demo.vue")
        export = next(n for n in ast["body"] if n["type"] == "ExportDefaultDeclaration")
        return ctx, export["declaration"]["properties"]

    return _members


@pytest.fixture
def member(component_members):
    """The first member of the component object, with its context."""

    def _member(source):
        ctx, members = component_members(source)
        return ctx, members[0]

    return _member
