"""
The per-component aggregation model.

Handlers push normalized members into a ``ComponentInfo``; once traversal is
done the watcher names are de-duplicated and the generator renders the class
from it. One instance lives for exactly one file's conversion.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from .mappings import VuexClassTool
from ..utils.string_utils import short_hash

Node = Dict[str, Any]


# ----------------------------------------------------------------------
# Normalized fragments
# ----------------------------------------------------------------------
@dataclass
class FuncInfo:
    """Any function-like option value: ``a() {}``, ``a: function () {}``, ``a: () => x``."""

    name: str
    params: List[Node]
    # None only when the source had no function at all
    body: Optional[Node] = None
    modifiers: List[str] = field(default_factory=list)
    is_async: bool = False
    is_generator: bool = False


@dataclass
class PropertyInfo:
    """A plain class field: `@Prop({...}) public aaa;`, `private bbb = 1;`."""

    name: str
    modifiers: List[str] = field(default_factory=list)
    # source text
    initializer: Optional[str] = None
    decorators: List[str] = field(default_factory=list)


@dataclass
class WatchInfo:
    func_info: FuncInfo
    # sibling entries of `handler`, e.g. `deep: true`
    options: Optional[List[Node]] = None


@dataclass
class StoreInfo:
    """
    One vuex binding.

    ``...settingStoreNS.mapGetters({ customerSetting: "currentSetting" })``
    gives map_tool=Getter, name="customerSetting",
    namespace="settingStoreNS", getter='"currentSetting"'.
    """

    map_tool: VuexClassTool
    name: str
    namespace: Optional[str]
    # arrow function source or a quoted string literal
    getter: str


# ----------------------------------------------------------------------
# Class members, rendered by the generator
# ----------------------------------------------------------------------
@dataclass
class MethodMember:
    name: str
    params: List[str] = field(default_factory=list)
    # a `{ ... }` block as source text
    body: str = "{\n}"
    decorators: List[str] = field(default_factory=list)
    modifiers: List[str] = field(default_factory=list)
    # "get" / "set" for computed accessors
    accessor: Optional[str] = None
    is_generator: bool = False


# ----------------------------------------------------------------------
# Aggregator
# ----------------------------------------------------------------------
@dataclass
class ComponentInfo:
    name: str = ""
    data: List[PropertyInfo] = field(default_factory=list)
    # `components: {...}` etc. are kept whole (source text of the property)
    components: Optional[str] = None
    directives: Optional[str] = None
    filters: Optional[str] = None
    computed: List[MethodMember] = field(default_factory=list)
    methods: List[Any] = field(default_factory=list)
    props: List[PropertyInfo] = field(default_factory=list)
    watch: List[MethodMember] = field(default_factory=list)
    lifecycle_hooks: List[MethodMember] = field(default_factory=list)
    statement_in_data_scope: List[str] = field(default_factory=list)
    stores: List[StoreInfo] = field(default_factory=list)
    # keys of components/directives/filters, they count as member names
    registered_names: List[str] = field(default_factory=list)
    # options the converter does not understand, kept verbatim
    unsupported_options: List[str] = field(default_factory=list)

    is_conversion_required: bool = False
    # stands in for line breaks inside template literals in the source
    # fragments above, see TransformContext
    line_break_marker: str = ""

    def set(self, prop: str, info: Any) -> None:
        if prop in ("is_conversion_required", "line_break_marker") or not hasattr(self, prop):
            raise AttributeError(f"ComponentInfo has no field {prop!r}")
        setattr(self, prop, info)
        if info and prop not in ("unsupported_options", "registered_names"):
            self.is_conversion_required = True

    def get(self, prop: str) -> Any:
        return getattr(self, prop, None) or None

    def append(self, prop: str, *items: Any) -> None:
        self.set(prop, list(getattr(self, prop)) + list(items))

    # ------------------------------------------------------------------
    # Watcher name collisions
    # ------------------------------------------------------------------
    def existing_member_names(self) -> FrozenSet[str]:
        """Every name a generated `on<Xxx>Change` watcher could clash with."""
        members: Iterable[Any] = [
            *self.data,
            *self.computed,
            *self.methods,
            *self.props,
            *self.lifecycle_hooks,
        ]
        return frozenset([m.name for m in members] + list(self.registered_names))

    def update_watch_method_names(self) -> None:
        existing = self.existing_member_names()
        taken = set()
        renamed = []
        for watcher in self.watch:
            new_name = resolve_unique_name(existing | taken, watcher.name)
            taken.add(new_name)
            renamed.append(watcher if new_name == watcher.name else replace(watcher, name=new_name))
        self.watch = renamed


def resolve_unique_name(existing: FrozenSet[str], name: str) -> str:
    """
    ``name``, or ``name_<hash>`` when ``name`` is already taken.

    The hash is taken over the previous candidate, so the same inputs always
    resolve to the same name.
    """
    candidate = name
    while candidate in existing:
        candidate = f"{name}_{short_hash(candidate)}"
    return candidate
