"""Data models for Angular constructs described by Compodoc's documentation.json.

Each construct kind is its own dataclass tagged by ``type``. Raw records are
validated here, at the load boundary, so the rest of the package never has to
probe dictionaries for optional keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Optional, Union

logger = logging.getLogger(__name__)


@dataclass
class Argument:
    name: str
    type: str = ""


@dataclass
class Member:
    """An input, output, property or method of a construct."""
    name: str
    type: str = ""
    line: Optional[int] = None
    deprecated: bool = False
    deprecation_message: str = ""
    description: str = ""
    default_value: Optional[str] = None
    args: List[Argument] = field(default_factory=list)
    return_type: Optional[str] = None


@dataclass
class ConstructorInfo:
    args: List[Argument] = field(default_factory=list)
    line: Optional[int] = None


@dataclass
class Reference:
    name: str


@dataclass
class _ConstructBase:
    name: str
    file: str = ""
    id: Optional[str] = None
    description: str = ""
    deprecated: bool = False
    deprecation_message: str = ""


@dataclass
class Component(_ConstructBase):
    type: Literal["component"] = "component"
    selector: Optional[str] = None
    standalone: bool = False
    template_url: List[str] = field(default_factory=list)
    style_urls: List[str] = field(default_factory=list)
    change_detection: Optional[str] = None
    inputs: List[Member] = field(default_factory=list)
    outputs: List[Member] = field(default_factory=list)
    properties: List[Member] = field(default_factory=list)
    methods: List[Member] = field(default_factory=list)
    constructor: Optional[ConstructorInfo] = None
    implements: List[str] = field(default_factory=list)
    extends: Optional[str] = None
    providers: List[Reference] = field(default_factory=list)
    imports: List[Reference] = field(default_factory=list)


@dataclass
class Directive(_ConstructBase):
    type: Literal["directive"] = "directive"
    selector: Optional[str] = None
    standalone: bool = False
    inputs: List[Member] = field(default_factory=list)
    outputs: List[Member] = field(default_factory=list)
    properties: List[Member] = field(default_factory=list)
    methods: List[Member] = field(default_factory=list)
    constructor: Optional[ConstructorInfo] = None
    implements: List[str] = field(default_factory=list)
    extends: Optional[str] = None
    providers: List[Reference] = field(default_factory=list)


@dataclass
class Injectable(_ConstructBase):
    type: Literal["injectable"] = "injectable"
    properties: List[Member] = field(default_factory=list)
    methods: List[Member] = field(default_factory=list)
    constructor: Optional[ConstructorInfo] = None
    implements: List[str] = field(default_factory=list)
    extends: Optional[str] = None


@dataclass
class Pipe(_ConstructBase):
    type: Literal["pipe"] = "pipe"
    pipe_name: Optional[str] = None
    pure: bool = True
    standalone: bool = False
    properties: List[Member] = field(default_factory=list)
    methods: List[Member] = field(default_factory=list)


@dataclass
class Module(_ConstructBase):
    type: Literal["module"] = "module"
    declarations: List[Reference] = field(default_factory=list)
    imports: List[Reference] = field(default_factory=list)
    exports: List[Reference] = field(default_factory=list)
    providers: List[Reference] = field(default_factory=list)
    bootstrap: List[Reference] = field(default_factory=list)


@dataclass
class ClassDoc(_ConstructBase):
    type: Literal["class"] = "class"
    properties: List[Member] = field(default_factory=list)
    methods: List[Member] = field(default_factory=list)
    constructor: Optional[ConstructorInfo] = None
    implements: List[str] = field(default_factory=list)
    extends: Optional[str] = None


AngularConstruct = Union[Component, Injectable, Directive, Pipe, Module, ClassDoc]

# documentation.json key -> construct tag, in flattening order
COLLECTION_KEYS: Dict[str, str] = {
    "components": "component",
    "injectables": "injectable",
    "directives": "directive",
    "pipes": "pipe",
    "modules": "module",
    "classes": "class",
}


# ===================================================================
# Field coercion helpers
# ===================================================================

def _str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _bool(value: Any, default: bool = False) -> bool:
    return value if isinstance(value, bool) else default


def _opt_int(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _records(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict) and isinstance(item.get("name"), str)]


def _description(raw: Dict[str, Any]) -> str:
    return _str(raw.get("rawdescription")) or _str(raw.get("description"))


def _arguments(value: Any) -> List[Argument]:
    return [Argument(name=item["name"], type=_str(item.get("type"))) for item in _records(value)]


def _members(value: Any) -> List[Member]:
    members = []
    for item in _records(value):
        default_value = item.get("defaultValue")
        members.append(
            Member(
                name=item["name"],
                type=_str(item.get("type")),
                line=_opt_int(item.get("line")),
                deprecated=_bool(item.get("deprecated")),
                deprecation_message=_str(item.get("deprecationMessage")),
                description=_description(item),
                default_value=str(default_value) if default_value not in (None, "") else None,
                args=_arguments(item.get("args")),
                return_type=_opt_str(item.get("returnType")),
            )
        )
    return members


def _references(value: Any) -> List[Reference]:
    return [Reference(name=item["name"]) for item in _records(value)]


def _constructor(value: Any) -> Optional[ConstructorInfo]:
    if not isinstance(value, dict):
        return None
    return ConstructorInfo(args=_arguments(value.get("args")), line=_opt_int(value.get("line")))


def _common(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": raw["name"],
        "file": _str(raw.get("file")),
        "id": _opt_str(raw.get("id")),
        "description": _description(raw),
        "deprecated": _bool(raw.get("deprecated")),
        "deprecation_message": _str(raw.get("deprecationMessage")),
    }


def _class_members(raw: Dict[str, Any], suffix: str = "") -> Dict[str, Any]:
    # Components and directives use the *Class keys, everything else the bare ones
    return {
        "properties": _members(raw.get(f"properties{suffix}")),
        "methods": _members(raw.get(f"methods{suffix}")),
    }


def _heritage(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "constructor": _constructor(raw.get("constructorObj")),
        "implements": _str_list(raw.get("implements")),
        "extends": _opt_str(raw.get("extends")),
    }


# ===================================================================
# Variant parsers
# ===================================================================

def _parse_component(raw: Dict[str, Any]) -> Component:
    return Component(
        **_common(raw),
        selector=_opt_str(raw.get("selector")),
        standalone=_bool(raw.get("standalone")),
        template_url=_str_list(raw.get("templateUrl")),
        style_urls=_str_list(raw.get("styleUrls")),
        change_detection=_opt_str(raw.get("changeDetection")),
        inputs=_members(raw.get("inputsClass")),
        outputs=_members(raw.get("outputsClass")),
        **_class_members(raw, "Class"),
        **_heritage(raw),
        providers=_references(raw.get("providers")),
        imports=_references(raw.get("imports")),
    )


def _parse_directive(raw: Dict[str, Any]) -> Directive:
    return Directive(
        **_common(raw),
        selector=_opt_str(raw.get("selector")),
        standalone=_bool(raw.get("standalone")),
        inputs=_members(raw.get("inputsClass")),
        outputs=_members(raw.get("outputsClass")),
        **_class_members(raw, "Class"),
        **_heritage(raw),
        providers=_references(raw.get("providers")),
    )


def _parse_injectable(raw: Dict[str, Any]) -> Injectable:
    return Injectable(**_common(raw), **_class_members(raw), **_heritage(raw))


def _parse_pipe(raw: Dict[str, Any]) -> Pipe:
    return Pipe(
        **_common(raw),
        pipe_name=_opt_str(raw.get("pipeName")),
        pure=_bool(raw.get("pure"), default=True),
        standalone=_bool(raw.get("standalone")),
        **_class_members(raw),
    )


def _parse_module(raw: Dict[str, Any]) -> Module:
    return Module(
        **_common(raw),
        declarations=_references(raw.get("declarations")),
        imports=_references(raw.get("imports")),
        exports=_references(raw.get("exports")),
        providers=_references(raw.get("providers")),
        bootstrap=_references(raw.get("bootstrap")),
    )


def _parse_class(raw: Dict[str, Any]) -> ClassDoc:
    return ClassDoc(**_common(raw), **_class_members(raw), **_heritage(raw))


_PARSERS: Dict[str, Callable[[Dict[str, Any]], AngularConstruct]] = {
    "component": _parse_component,
    "injectable": _parse_injectable,
    "directive": _parse_directive,
    "pipe": _parse_pipe,
    "module": _parse_module,
    "class": _parse_class,
}


def parse_construct(kind: str, raw: Any) -> Optional[AngularConstruct]:
    """Validate one raw record into its construct variant.

    The tag comes from the collection the record was found in, not from the
    record itself. Records without a usable ``name`` are skipped.
    """
    if not isinstance(raw, dict):
        logger.warning("Skipping %s entry that is not an object", kind)
        return None
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        logger.warning("Skipping %s entry without a name (file=%r)", kind, raw.get("file"))
        return None
    return _PARSERS[kind](raw)


def selector_of(construct: AngularConstruct) -> Optional[str]:
    """Selector for components/directives, pipe name for pipes."""
    if isinstance(construct, (Component, Directive)):
        return construct.selector
    if isinstance(construct, Pipe):
        return construct.pipe_name
    return None


@dataclass
class Documentation:
    """Parsed documentation.json, partitioned by construct kind."""
    components: List[Component] = field(default_factory=list)
    injectables: List[Injectable] = field(default_factory=list)
    directives: List[Directive] = field(default_factory=list)
    pipes: List[Pipe] = field(default_factory=list)
    modules: List[Module] = field(default_factory=list)
    classes: List[ClassDoc] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Documentation":
        partitions: Dict[str, list] = {}
        for key, kind in COLLECTION_KEYS.items():
            raw_items = payload.get(key)
            if raw_items is not None and not isinstance(raw_items, list):
                logger.warning("Ignoring '%s': expected a list, got %s", key, type(raw_items).__name__)
                raw_items = None
            parsed = (parse_construct(kind, item) for item in raw_items or [])
            partitions[key] = [item for item in parsed if item is not None]
        return cls(**partitions)

    def all_constructs(self) -> List[AngularConstruct]:
        """Flattened constructs in a fixed kind order."""
        return [
            *self.components,
            *self.injectables,
            *self.directives,
            *self.pipes,
            *self.modules,
            *self.classes,
        ]

    def counts(self) -> Dict[str, int]:
        return {key: len(getattr(self, key)) for key in COLLECTION_KEYS}
