import textwrap

import pytest

from option2class import TranspilerConfig, convert_script

COMPONENT = textwrap.dedent(
    """\
    import Vue from "vue";
    import { mapState } from "vuex";
    import Child from "./Child.vue";

    export default {
      name: "Demo",
      components: { Child },
      props: ["a", "b"],
      data() {
        const x = 1;
        return {
          y: x,
        };
      },
      computed: {
        ...mapState(["count"]),
        double() {
          return this.y * 2;
        },
      },
      watch: {
        "obj.id"(val) {
          this.y = val;
        },
      },
      methods: {
        inc() {
          this.y++;
        },
      },
      mounted() {
        this.inc();
      },
    };
    """
)

EXPECTED = textwrap.dedent(
    """\
    import * as tsx from "vue-tsx-support";
    import { Component, Vue, Prop, Watch } from "vue-property-decorator";
    import { State } from "vuex-class";
    import Child from "./Child.vue";
    const x = 1;
    @Component({
        components: { Child }
    })
    export default class Demo extends Vue {
        public _tsx!: tsx.DeclareProps<tsx.AutoProps<this>> & tsx.DeclareOnEvents<ComEvents>;
        @State("count")
        private count;
        private y = x;
        private get double() {
          return this.y * 2;
        }
        @Prop({ required: false })
        public a;
        @Prop({ required: false })
        public b;
        @Watch("obj.id")
        private onObjIdChange(val) {
          this.y = val;
        }
        private inc() {
          this.y++;
        }
        protected mounted() {
          this.inc();
        }
    }
    """
)


def test_full_component():
    result = convert_script(COMPONENT, "Demo.vue")

    assert result.converted
    assert result.code == EXPECTED
    assert result.diagnostics == []


def test_output_is_deterministic():
    assert convert_script(COMPONENT, "Demo.vue").code == convert_script(COMPONENT, "Demo.vue").code


def test_passthrough_without_options():
    source = 'import helper from "./helper";\nexport default helper;\n'

    result = convert_script(source, "Demo.vue")

    assert not result.converted
    assert result.code == source


def test_passthrough_keeps_unsupported_only_component():
    source = "export default { mixins: [base] };\n"

    result = convert_script(source, "Demo.vue")

    assert result.code == source
    assert len(result.diagnostics) == 1


def test_namespaced_store():
    source = textwrap.dedent(
        """\
        import { createNamespacedHelpers } from "vuex";
        const meStoreNS = createNamespacedHelpers("me");
        export default {
          computed: {
            ...meStoreNS.mapState(["count"]),
          },
          methods: {
            ...mapActions({ load: (dispatch, id) => dispatch("load", id) }),
          },
        };
        """
    )

    code = convert_script(source, "Demo.vue").code

    assert 'import { Action, namespace } from "vuex-class";' in code
    assert "vuex\";" not in code
    assert 'const meStoreNS = namespace("me");' in code
    assert '    @meStoreNS.State("count")\n    private count;' in code
    assert '    @Action((dispatch, id) => dispatch("load", id))\n    private load;' in code


def test_unsupported_options_join_component_decorator():
    source = textwrap.dedent(
        """\
        export default {
          components: { Child },
          mixins: [
            base,
          ],
          mounted() {},
        };
        """
    )

    result = convert_script(source, "Demo.vue")

    assert "@Component({\n    components: { Child },\n    mixins: [\n      base,\n    ]\n})" in result.code
    assert result.diagnostics[0].line == 3


def test_unsupported_options_can_be_dropped():
    source = "export default { mixins: [base], mounted() {} };\n"

    result = convert_script(source, "Demo.vue", TranspilerConfig(keep_unsupported_options=False))

    assert "@Component\nexport default class Demo extends Vue {" in result.code
    assert "mixins" not in result.code


def test_decorator_import_only_names_what_is_used():
    code = convert_script("export default { mounted() {} }", "Demo.vue").code

    assert 'import { Component, Vue } from "vue-property-decorator";' in code
    assert "vuex-class" not in code


@pytest.mark.parametrize(
    "source, file_uri, class_name",
    [
        ('export default { name: "Explicit", mounted() {} }', "Demo.vue", "Explicit"),
        ("export default { mounted() {} }", "src/components/demo.vue", "Demo"),
        ("export default { mounted() {} }", "my-widget.vue", "MyWidget"),
        ("export default { mounted() {} }", "", "Component"),
    ],
)
def test_class_name(source, file_uri, class_name):
    code = convert_script(source, file_uri).code

    assert f"export default class {class_name} extends Vue {{" in code


def test_data_and_methods_render_as_fields():
    source = textwrap.dedent(
        """\
        import axios from "axios";
        export default {
          data: () => ({
            items: [
              1,
            ],
          }),
          methods: {
            axios,
          },
        };
        """
    )

    code = convert_script(source, "Demo.vue").code

    assert "    private items = [\n      1,\n    ];" in code
    assert "    private axios = axios;" in code
    assert 'import axios from "axios";' in code


def test_computed_accessors():
    source = textwrap.dedent(
        """\
        export default {
          computed: {
            full: {
              get() {
                return this.a;
              },
              set(v) {
                this.a = v;
              },
            },
            double: () => this.n * 2,
          },
        };
        """
    )

    code = convert_script(source, "Demo.vue").code

    assert "    private get full() {\n" in code
    assert "    private set full(v) {\n" in code
    assert "    private get double() {\n        return this.n * 2;\n    }" in code


def test_watch_with_options_and_collision():
    source = textwrap.dedent(
        """\
        export default {
          watch: {
            editInfo: {
              handler(obj) {},
              deep: true,
              immediate: true,
            },
          },
          methods: {
            onEditInfoChange() {},
          },
        };
        """
    )

    code = convert_script(source, "Demo.vue").code

    assert '    @Watch("editInfo", { deep: true, immediate: true })\n    private onEditInfoChange_' in code
    assert "    private onEditInfoChange() {}" in code


def test_template_literal_in_method_body_is_kept_verbatim():
    source = textwrap.dedent(
        """\
        export default {
          methods: {
            html() {
              return `<ul>
        <li>a</li>
        </ul>`;
            },
          },
        };
        """
    )

    code = convert_script(source, "Demo.vue").code

    assert "    private html() {\n      return `<ul>\n<li>a</li>\n</ul>`;\n    }" in code


def test_template_literal_in_hoisted_statement_is_kept_verbatim():
    source = (
        "export default {\n"
        "  data() {\n"
        "    const tpl = `a\n"
        "        b`;\n"
        "    return { tpl };\n"
        "  },\n"
        "};\n"
    )

    code = convert_script(source, "Demo.vue").code

    assert "\nconst tpl = `a\n        b`;\n" in code
    assert "    private tpl = tpl;" in code


def test_continued_string_in_initializer_is_kept_verbatim():
    source = (
        "export default {\n"
        "  data() {\n"
        "    return {\n"
        "      msg: 'one \\\n"
        "  two',\n"
        "    };\n"
        "  },\n"
        "};\n"
    )

    code = convert_script(source, "Demo.vue").code

    assert "    private msg = 'one \\\n  two';" in code


def test_top_level_comments_are_kept():
    source = textwrap.dedent(
        """\
        /* eslint-disable no-console */
        import Vue from "vue";
        // dropped with vuex
        import { createNamespacedHelpers } from "vuex";
        import helper from "./helper"; // local helper
        // store namespace
        const ns = createNamespacedHelpers("me");

        /** The demo component */
        export default {
          computed: {
            ...ns.mapState(["count"]),
          },
        };
        """
    )

    code = convert_script(source, "Demo.vue").code

    assert code.startswith('/* eslint-disable no-console */\nimport * as tsx from "vue-tsx-support";\n')
    assert 'import helper from "./helper"; // local helper\n' in code
    assert '// store namespace\nconst ns = namespace("me");\n' in code
    assert "/** The demo component */\n@Component\nexport default class Demo extends Vue {" in code
    assert "dropped with vuex" not in code
