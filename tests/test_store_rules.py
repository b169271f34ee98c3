from option2class.transformer.mappings import VuexClassTool
from option2class.transformer.rules.methods_rules import MethodsRules
from option2class.transformer.rules.store_rules import StoreRules


def spread_of(member, helper_call):
    ctx, computed = member("export default { computed: { ...%s } }" % helper_call)
    return ctx, computed["value"]["properties"][0]


def test_array_argument(member):
    ctx, spread = spread_of(member, 'mapState(["count", "total"])')

    stores = StoreRules().transform(spread, ctx)

    assert [s.name for s in stores] == ["count", "total"]
    assert stores[0].map_tool is VuexClassTool.STATE
    assert stores[0].namespace is None
    assert stores[0].getter == '"count"'
    assert ctx.component.stores == stores
    assert ctx.component.is_conversion_required


def test_namespaced_helper(member):
    ctx, spread = spread_of(member, 'meStoreNS.mapGetters(["currentSetting"])')

    (store,) = StoreRules().transform(spread, ctx)

    assert store.map_tool is VuexClassTool.GETTER
    assert store.namespace == "meStoreNS"
    assert store.name == "currentSetting"


def test_object_argument_with_functions(member):
    ctx, spread = spread_of(member, "mapState({ isPartner: state => state.me.partner })")

    (store,) = StoreRules().transform(spread, ctx)

    assert store.name == "isPartner"
    assert store.getter == "(state) => state.me.partner"


def test_object_argument_with_identifiers(member):
    ctx, spread = spread_of(member, "mapGetters({ me: meGetter, other })")

    stores = StoreRules().transform(spread, ctx)

    assert [(s.name, s.getter) for s in stores] == [("me", "meGetter"), ("other", "other")]
    assert len(ctx.diagnostics) == 0


def test_object_argument_alias_is_reported(member):
    ctx, spread = spread_of(member, 'mapActions({ add: "increment", load() {} })')

    stores = StoreRules().transform(spread, ctx)

    assert [s.name for s in stores] == ["load"]
    assert stores[0].map_tool is VuexClassTool.ACTION
    assert len(ctx.diagnostics) == 1
    assert "only functions are converted" in ctx.diagnostics.messages()[0]


def test_unknown_spread_is_reported(member):
    ctx, spread = spread_of(member, "otherHelpers()")

    assert StoreRules().transform(spread, ctx) == []
    assert ctx.component.stores == []
    assert not ctx.component.is_conversion_required
    assert "unsupported spread" in ctx.diagnostics.messages()[0]


def test_namespace_helper_is_not_a_map_helper(member):
    ctx, spread = spread_of(member, 'createNamespacedHelpers("me")')

    assert StoreRules().transform(spread, ctx) == []


def test_namespaced_helper_inside_methods(member):
    ctx, methods = member('export default { methods: { ...ns.mapActions(["fetch"]) } }')

    MethodsRules().transform(methods, ctx)

    (store,) = ctx.component.stores
    assert store.namespace == "ns"
    assert store.map_tool is VuexClassTool.ACTION
    assert store.name == "fetch"
    assert ctx.component.methods == []
