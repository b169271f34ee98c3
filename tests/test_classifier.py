import pytest

from option2class.transformer.classifier import OptionKind, classify, option_key


@pytest.mark.parametrize(
    "member_source, expected",
    [
        ('name: "Demo"', OptionKind.NAME),
        ("data() { return {}; }", OptionKind.DATA),
        ("data: () => ({})", OptionKind.DATA),
        ("data: function () { return {}; }", OptionKind.DATA),
        ("components: { Child }", OptionKind.COMPONENTS),
        ("computed: {}", OptionKind.COMPUTED),
        ("methods: {}", OptionKind.METHODS),
        ('props: ["a"]', OptionKind.PROPS),
        ("watch: {}", OptionKind.WATCH),
        ("directives: {}", OptionKind.DIRECTIVES),
        ("filters: {}", OptionKind.FILTERS),
        ("mounted() {}", OptionKind.LIFECYCLE_HOOK),
        ("beforeDestroy: function () {}", OptionKind.LIFECYCLE_HOOK),
        ('"created"() {}', OptionKind.LIFECYCLE_HOOK),
    ],
)
def test_recognized_options(member, member_source, expected):
    _, node = member("export default { %s }" % member_source)

    assert classify(node) is expected


@pytest.mark.parametrize(
    "member_source",
    [
        "mixins: [base]",
        "methods() {}",
        "computed() {}",
        "[key]: 1",
        "get mounted() { return 1; }",
        "...base",
    ],
)
def test_unrecognized_members(member, member_source):
    _, node = member("const base = {}, key = 'x';\nexport default { %s }" % member_source)

    assert classify(node) is OptionKind.UNRECOGNIZED


def test_shorthand_option_is_unrecognized(member):
    _, node = member("const props = [];\nexport default { props }")

    assert classify(node) is OptionKind.UNRECOGNIZED


def test_non_members_are_not_classified(parser):
    ast = parser.parse('import Vue from "vue";\nconst a = 1;')

    assert all(classify(stmt) is OptionKind.NONE for stmt in ast["body"])
    assert classify(None) is OptionKind.NONE


def test_option_key(member):
    _, node = member('export default { "watch": {} }')

    assert option_key(node) == "watch"
    assert classify(node) is OptionKind.WATCH
