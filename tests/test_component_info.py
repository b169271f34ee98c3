import pytest

from option2class.transformer.component_info import (
    ComponentInfo,
    MethodMember,
    PropertyInfo,
    resolve_unique_name,
)
from option2class.utils.string_utils import short_hash


def test_set_flips_conversion_flag_on_truthy_values():
    component = ComponentInfo()

    component.set("data", [])
    assert not component.is_conversion_required

    component.set("name", "Demo")
    assert component.is_conversion_required
    assert component.get("name") == "Demo"


def test_unsupported_options_alone_do_not_require_conversion():
    component = ComponentInfo()

    component.set("unsupported_options", ["mixins: [base]"])
    component.set("registered_names", ["Child"])

    assert not component.is_conversion_required


def test_set_rejects_unknown_fields():
    component = ComponentInfo()

    with pytest.raises(AttributeError):
        component.set("templates", ["x"])
    with pytest.raises(AttributeError):
        component.set("is_conversion_required", True)


def test_append_keeps_previous_items():
    component = ComponentInfo()

    component.append("methods", MethodMember(name="a"))
    component.append("methods", MethodMember(name="b"), PropertyInfo(name="c"))

    assert [m.name for m in component.methods] == ["a", "b", "c"]


def test_resolve_unique_name():
    assert resolve_unique_name(frozenset(), "onAChange") == "onAChange"

    resolved = resolve_unique_name(frozenset(["onAChange"]), "onAChange")
    assert resolved == "onAChange_" + short_hash("onAChange")
    # same inputs, same answer
    assert resolve_unique_name(frozenset(["onAChange"]), "onAChange") == resolved


def test_resolve_unique_name_retries_until_free():
    first = "onAChange_" + short_hash("onAChange")
    second = "onAChange_" + short_hash(first)

    assert resolve_unique_name(frozenset(["onAChange", first]), "onAChange") == second


def test_watchers_avoid_other_members_and_each_other():
    component = ComponentInfo(
        methods=[MethodMember(name="onAChange")],
        registered_names=["onBChange"],
        watch=[
            MethodMember(name="onAChange"),
            MethodMember(name="onBChange"),
            MethodMember(name="onCChange"),
            MethodMember(name="onCChange"),
        ],
    )

    component.update_watch_method_names()
    names = [w.name for w in component.watch]

    assert names[0] == "onAChange_" + short_hash("onAChange")
    assert names[1] == "onBChange_" + short_hash("onBChange")
    assert names[2] == "onCChange"
    assert names[3] == "onCChange_" + short_hash("onCChange")
    assert len(set(names)) == 4


def test_renaming_is_idempotent():
    component = ComponentInfo(
        data=[PropertyInfo(name="onAChange")],
        watch=[MethodMember(name="onAChange")],
    )

    component.update_watch_method_names()
    once = [w.name for w in component.watch]
    component.update_watch_method_names()

    assert [w.name for w in component.watch] == once
