"""
Vue option API and vuex mappings onto the class API.
"""

from enum import Enum
from typing import Optional


class VuexMapTool(str, Enum):
    MAP_STATE = "mapState"
    MAP_MUTATIONS = "mapMutations"
    MAP_GETTERS = "mapGetters"
    MAP_ACTIONS = "mapActions"
    NAMESPACE = "createNamespacedHelpers"


class VuexClassTool(str, Enum):
    STATE = "State"
    MUTATION = "Mutation"
    GETTER = "Getter"
    ACTION = "Action"
    NAMESPACE = "namespace"


class VueClassMappings:
    """Mappings between option API names and class API constructs."""

    # Lifecycle hooks, in the order Vue calls them
    LIFECYCLE_HOOKS = (
        "beforeCreate",
        "created",
        "beforeMount",
        "mounted",
        "beforeUpdate",
        "updated",
        "activated",
        "deactivated",
        "beforeDestroy",
        "destroyed",
        "errorCaptured",
    )

    # The only options this converter understands; anything else is reported
    OPTION_API = (
        "name",
        "data",
        "components",
        "computed",
        "methods",
        "props",
        "watch",
        "directives",
        "filters",
    )

    # vuex helper -> vuex-class decorator
    VUEX_MAPPINGS = {
        VuexMapTool.MAP_STATE: VuexClassTool.STATE,
        VuexMapTool.MAP_GETTERS: VuexClassTool.GETTER,
        VuexMapTool.MAP_MUTATIONS: VuexClassTool.MUTATION,
        VuexMapTool.MAP_ACTIONS: VuexClassTool.ACTION,
        VuexMapTool.NAMESPACE: VuexClassTool.NAMESPACE,
    }

    # `export default Vue.extend({...})`, compared lower-cased
    BASE_OBJECT_FACTORY = "vue.extend"

    # Imports dropped from the output; the class API replaces them
    FRAMEWORK_MODULES = ("vue", "vuex")

    TSX_MODULE = "vue-tsx-support"
    DECORATOR_MODULE = "vue-property-decorator"
    VUEX_CLASS_MODULE = "vuex-class"
    BASE_CLASS = "Vue"
    TSX_FIELD = "public _tsx!: tsx.DeclareProps<tsx.AutoProps<this>> & tsx.DeclareOnEvents<ComEvents>;"

    def is_lifecycle_hook(self, name: str) -> bool:
        return name in self.LIFECYCLE_HOOKS

    def get_vuex_mapping(self, helper: str) -> Optional[VuexClassTool]:
        """Get the vuex-class decorator for a vuex helper name (mapState -> State)."""
        try:
            return self.VUEX_MAPPINGS.get(VuexMapTool(helper))
        except ValueError:
            return None

    def is_map_helper(self, helper: str) -> bool:
        return helper != VuexMapTool.NAMESPACE.value and self.get_vuex_mapping(helper) is not None
