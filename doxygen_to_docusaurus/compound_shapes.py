"""Shapes for Doxygen compound documents (``<refid>.xml``)."""

from dataclasses import dataclass, field

from doxygen_to_docusaurus.attributed_node import AttributedNode, get_attribute_str
from doxygen_to_docusaurus.description_shapes import (
    DescriptionBlock,
    LinkedText,
    ProgramListing,
    parse_description,
)
from doxygen_to_docusaurus.errors import MissingChildError, SchemaViolation
from doxygen_to_docusaurus.schema_node import (
    Shape,
    check_attributes,
    iter_elements,
    optional_bool,
    optional_int,
    optional_str,
    parse_text_only,
    shape_label,
)

# Recognized, but carry nothing the pages render.
IGNORED_ELEMENTS = frozenset(
    {
        "incdepgraph",
        "invincdepgraph",
        "inheritancegraph",
        "collaborationgraph",
        "tableofcontents",
    }
)

INNER_ELEMENTS = frozenset(
    {
        "innerdir",
        "innerfile",
        "innerclass",
        "innernamespace",
        "innerpage",
        "innergroup",
    }
)


@dataclass(frozen=True)
class Location(Shape):
    """Declaration and definition coordinates of a compound or member."""

    file: str
    line: int | None = None
    column: int | None = None
    declfile: str | None = None
    declline: int | None = None
    declcolumn: int | None = None
    bodyfile: str | None = None
    bodystart: int | None = None
    bodyend: int | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Location":
        label = shape_label(cls, node)
        check_attributes(
            node,
            (
                "file",
                "line",
                "column",
                "declfile",
                "declline",
                "declcolumn",
                "bodyfile",
                "bodystart",
                "bodyend",
            ),
            label,
        )
        parse_text_only(node, label)
        return cls(
            node.name,
            file=get_attribute_str(node, "file"),
            line=optional_int(node, "line"),
            column=optional_int(node, "column"),
            declfile=optional_str(node, "declfile"),
            declline=optional_int(node, "declline"),
            declcolumn=optional_int(node, "declcolumn"),
            bodyfile=optional_str(node, "bodyfile"),
            bodystart=optional_int(node, "bodystart"),
            bodyend=optional_int(node, "bodyend"),
        )


@dataclass(frozen=True)
class CompoundRef(Shape):
    """A ``basecompoundref`` or ``derivedcompoundref``."""

    text: str
    refid: str | None = None
    prot: str = "public"
    virt: str = "non-virtual"

    @classmethod
    def from_node(cls, node: AttributedNode) -> "CompoundRef":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "prot", "virt"), label)
        return cls(
            node.name,
            text=parse_text_only(node, label),
            refid=optional_str(node, "refid"),
            prot=optional_str(node, "prot") or "public",
            virt=optional_str(node, "virt") or "non-virtual",
        )


@dataclass(frozen=True)
class IncludeRef(Shape):
    """An ``includes`` or ``includedby`` line."""

    text: str
    refid: str | None = None
    local: bool = False

    @classmethod
    def from_node(cls, node: AttributedNode) -> "IncludeRef":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "local"), label)
        return cls(
            node.name,
            text=parse_text_only(node, label),
            refid=optional_str(node, "refid"),
            local=optional_bool(node, "local"),
        )


@dataclass(frozen=True)
class InnerRef(Shape):
    """A reference to a nested compound (``innerclass``, ``innerdir``...)."""

    refid: str
    text: str
    prot: str | None = None
    inline: bool = False

    @classmethod
    def from_node(cls, node: AttributedNode) -> "InnerRef":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "prot", "inline"), label)
        return cls(
            node.name,
            refid=get_attribute_str(node, "refid"),
            text=parse_text_only(node, label),
            prot=optional_str(node, "prot"),
            inline=optional_bool(node, "inline"),
        )


@dataclass(frozen=True)
class MemberReference(Shape):
    """``references``, ``referencedby``, ``reimplements``, ``reimplementedby``."""

    refid: str
    text: str
    compoundref: str | None = None
    startline: int | None = None
    endline: int | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "MemberReference":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "compoundref", "startline", "endline"), label)
        return cls(
            node.name,
            refid=get_attribute_str(node, "refid"),
            text=parse_text_only(node, label),
            compoundref=optional_str(node, "compoundref"),
            startline=optional_int(node, "startline"),
            endline=optional_int(node, "endline"),
        )


@dataclass(frozen=True)
class Param(Shape):
    """A function or template parameter."""

    attributes: str | None = None
    type: LinkedText | None = None
    declname: str | None = None
    defname: str | None = None
    array: str | None = None
    defval: LinkedText | None = None
    typeconstraint: LinkedText | None = None
    brief_description: DescriptionBlock | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "Param":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        values: dict[str, object] = {}
        for child in iter_elements(node, label):
            if child.name in {"attributes", "declname", "defname", "array"}:
                values[child.name] = parse_text_only(child, label)
            elif child.name in {"type", "defval", "typeconstraint"}:
                values[child.name] = LinkedText.from_node(child)
            elif child.name == "briefdescription":
                values["brief_description"] = parse_description(child)
            else:
                raise SchemaViolation(child.name, label)
        return cls(node.name, **values)


@dataclass(frozen=True)
class TemplateParamList(Shape):
    """The ``template <...>`` parameters of a class or member."""

    params: list[Param]

    @classmethod
    def from_node(cls, node: AttributedNode) -> "TemplateParamList":
        label = shape_label(cls, node)
        check_attributes(node, (), label)
        params = []
        for child in iter_elements(node, label):
            if child.name != "param":
                raise SchemaViolation(child.name, label)
            params.append(Param.from_node(child))
        return cls(node.name, params=params)


@dataclass(frozen=True)
class EnumValue(Shape):
    """One enumerator of an enum member."""

    id: str
    name: str
    prot: str = "public"
    initializer: LinkedText | None = None
    brief_description: DescriptionBlock | None = None
    detailed_description: DescriptionBlock | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "EnumValue":
        label = shape_label(cls, node)
        check_attributes(node, ("id", "prot"), label)
        name = None
        initializer = brief = detailed = None
        for child in iter_elements(node, label):
            if child.name == "name":
                name = parse_text_only(child, label)
            elif child.name == "initializer":
                initializer = LinkedText.from_node(child)
            elif child.name == "briefdescription":
                brief = parse_description(child)
            elif child.name == "detaileddescription":
                detailed = parse_description(child)
            else:
                raise SchemaViolation(child.name, label)
        if name is None:
            raise MissingChildError(node.name, "name")
        return cls(
            node.name,
            id=get_attribute_str(node, "id"),
            name=name,
            prot=optional_str(node, "prot") or "public",
            initializer=initializer,
            brief_description=brief,
            detailed_description=detailed,
        )


_MEMBERDEF_FLAGS = (
    "static",
    "extern",
    "strong",
    "const",
    "explicit",
    "inline",
    "volatile",
    "mutable",
    "noexcept",
    "nodiscard",
    "constexpr",
    "consteval",
    "constinit",
    "final",
)


@dataclass(frozen=True)
class MemberDef(Shape):
    """A fully documented member: function, variable, typedef, enum, etc."""

    kind: str
    id: str
    prot: str
    name: str
    flags: frozenset[str] = frozenset()
    virt: str | None = None
    refqual: str | None = None
    noexcept_expression: str | None = None
    template_param_list: TemplateParamList | None = None
    type: LinkedText | None = None
    definition: str | None = None
    argsstring: str | None = None
    qualified_name: str | None = None
    bitfield: str | None = None
    qualifiers: list[str] = field(default_factory=list)
    reimplements: list[MemberReference] = field(default_factory=list)
    reimplemented_by: list[MemberReference] = field(default_factory=list)
    params: list[Param] = field(default_factory=list)
    enum_values: list[EnumValue] = field(default_factory=list)
    initializer: LinkedText | None = None
    requires_clause: LinkedText | None = None
    exceptions: LinkedText | None = None
    brief_description: DescriptionBlock | None = None
    detailed_description: DescriptionBlock | None = None
    inbody_description: DescriptionBlock | None = None
    location: Location | None = None
    references: list[MemberReference] = field(default_factory=list)
    referenced_by: list[MemberReference] = field(default_factory=list)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    @classmethod
    def from_node(cls, node: AttributedNode) -> "MemberDef":
        label = shape_label(cls, node)
        check_attributes(
            node,
            ("kind", "id", "prot", "virt", "refqual", "noexceptexpression")
            + _MEMBERDEF_FLAGS,
            label,
        )
        values: dict[str, object] = {}
        lists: dict[str, list] = {
            "qualifiers": [],
            "reimplements": [],
            "reimplemented_by": [],
            "params": [],
            "enum_values": [],
            "references": [],
            "referenced_by": [],
        }
        for child in iter_elements(node, label):
            name = child.name
            if name in {"name", "definition", "argsstring", "bitfield"}:
                values[name] = parse_text_only(child, label)
            elif name == "qualifiedname":
                values["qualified_name"] = parse_text_only(child, label)
            elif name == "qualifier":
                lists["qualifiers"].append(parse_text_only(child, label))
            elif name == "location":
                values["location"] = Location.from_node(child)
            elif name == "templateparamlist":
                values["template_param_list"] = TemplateParamList.from_node(child)
            elif name in {"type", "initializer"}:
                values[name] = LinkedText.from_node(child)
            elif name == "requiresclause":
                values["requires_clause"] = LinkedText.from_node(child)
            elif name == "exceptions":
                values["exceptions"] = LinkedText.from_node(child)
            elif name == "reimplements":
                lists["reimplements"].append(MemberReference.from_node(child))
            elif name == "reimplementedby":
                lists["reimplemented_by"].append(MemberReference.from_node(child))
            elif name == "param":
                lists["params"].append(Param.from_node(child))
            elif name == "enumvalue":
                lists["enum_values"].append(EnumValue.from_node(child))
            elif name == "briefdescription":
                values["brief_description"] = parse_description(child)
            elif name == "detaileddescription":
                values["detailed_description"] = parse_description(child)
            elif name == "inbodydescription":
                values["inbody_description"] = parse_description(child)
            elif name == "references":
                lists["references"].append(MemberReference.from_node(child))
            elif name == "referencedby":
                lists["referenced_by"].append(MemberReference.from_node(child))
            else:
                raise SchemaViolation(name, label)
        if "name" not in values:
            raise MissingChildError(node.name, "name")
        flags = frozenset(
            flag
            for flag in _MEMBERDEF_FLAGS
            if optional_bool(node, flag)
        )
        return cls(
            node.name,
            kind=get_attribute_str(node, "kind"),
            id=get_attribute_str(node, "id"),
            prot=get_attribute_str(node, "prot"),
            flags=flags,
            virt=optional_str(node, "virt"),
            refqual=optional_str(node, "refqual"),
            noexcept_expression=optional_str(node, "noexceptexpression"),
            **values,
            **lists,
        )


@dataclass(frozen=True)
class SectionMember(Shape):
    """A ``<member>`` entry pointing at a member defined in another compound."""

    refid: str
    kind: str
    name: str

    @classmethod
    def from_node(cls, node: AttributedNode) -> "SectionMember":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "kind"), label)
        name = None
        for child in iter_elements(node, label):
            if child.name != "name":
                raise SchemaViolation(child.name, label)
            name = parse_text_only(child, label)
        if name is None:
            raise MissingChildError(node.name, "name")
        return cls(
            node.name,
            refid=get_attribute_str(node, "refid"),
            kind=get_attribute_str(node, "kind"),
            name=name,
        )


@dataclass(frozen=True)
class SectionDef(Shape):
    """A ``<sectiondef>``: a group of members as Doxygen emitted it."""

    kind: str
    header: str | None = None
    description: DescriptionBlock | None = None
    member_defs: list[MemberDef] = field(default_factory=list)
    members: list[SectionMember] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: AttributedNode) -> "SectionDef":
        label = shape_label(cls, node)
        check_attributes(node, ("kind",), label)
        header = description = None
        member_defs, members = [], []
        for child in iter_elements(node, label):
            if child.name == "header":
                header = parse_text_only(child, label)
            elif child.name == "description":
                description = parse_description(child)
            elif child.name == "memberdef":
                member_defs.append(MemberDef.from_node(child))
            elif child.name == "member":
                members.append(SectionMember.from_node(child))
            else:
                raise SchemaViolation(child.name, label)
        return cls(
            node.name,
            kind=get_attribute_str(node, "kind"),
            header=header,
            description=description,
            member_defs=member_defs,
            members=members,
        )


@dataclass(frozen=True)
class AllMembersEntry(Shape):
    """One row of ``listofallmembers``."""

    refid: str
    name: str
    scope: str | None = None
    prot: str | None = None
    virt: str | None = None
    ambiguity_scope: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "AllMembersEntry":
        label = shape_label(cls, node)
        check_attributes(node, ("refid", "prot", "virt", "ambiguityscope"), label)
        name = scope = None
        for child in iter_elements(node, label):
            if child.name == "name":
                name = parse_text_only(child, label)
            elif child.name == "scope":
                scope = parse_text_only(child, label)
            else:
                raise SchemaViolation(child.name, label)
        if name is None:
            raise MissingChildError(node.name, "name")
        return cls(
            node.name,
            refid=get_attribute_str(node, "refid"),
            name=name,
            scope=scope,
            prot=optional_str(node, "prot"),
            virt=optional_str(node, "virt"),
            ambiguity_scope=optional_str(node, "ambiguityscope"),
        )


_COMPOUNDDEF_ATTRIBUTES = (
    "id",
    "kind",
    "language",
    "prot",
    "final",
    "inline",
    "sealed",
    "abstract",
)


@dataclass(frozen=True)
class CompoundDef(Shape):
    """A ``<compounddef>``: the full definition of one compound."""

    id: str
    kind: str
    compound_name: str
    language: str | None = None
    prot: str | None = None
    flags: frozenset[str] = frozenset()
    title: str | None = None
    brief_description: DescriptionBlock | None = None
    detailed_description: DescriptionBlock | None = None
    base_compound_refs: list[CompoundRef] = field(default_factory=list)
    derived_compound_refs: list[CompoundRef] = field(default_factory=list)
    includes: list[IncludeRef] = field(default_factory=list)
    included_by: list[IncludeRef] = field(default_factory=list)
    inner: dict[str, list[InnerRef]] = field(default_factory=dict)
    template_param_list: TemplateParamList | None = None
    section_defs: list[SectionDef] = field(default_factory=list)
    program_listing: ProgramListing | None = None
    location: Location | None = None
    all_members: list[AllMembersEntry] = field(default_factory=list)

    def inner_refs(self, element_name: str) -> list[InnerRef]:
        """Return the ``inner*`` references of one kind, e.g. ``innerclass``."""
        return self.inner.get(element_name, [])

    @classmethod
    def from_node(cls, node: AttributedNode) -> "CompoundDef":
        label = shape_label(cls, node)
        check_attributes(node, _COMPOUNDDEF_ATTRIBUTES, label)
        values: dict[str, object] = {}
        base_refs, derived_refs, includes, included_by = [], [], [], []
        inner: dict[str, list[InnerRef]] = {}
        section_defs, all_members = [], []
        for child in iter_elements(node, label):
            name = child.name
            if name == "compoundname":
                values["compound_name"] = parse_text_only(child, label)
            elif name == "title":
                values["title"] = parse_text_only(child, label)
            elif name == "briefdescription":
                values["brief_description"] = parse_description(child)
            elif name == "detaileddescription":
                values["detailed_description"] = parse_description(child)
            elif name == "basecompoundref":
                base_refs.append(CompoundRef.from_node(child))
            elif name == "derivedcompoundref":
                derived_refs.append(CompoundRef.from_node(child))
            elif name == "includes":
                includes.append(IncludeRef.from_node(child))
            elif name == "includedby":
                included_by.append(IncludeRef.from_node(child))
            elif name in INNER_ELEMENTS:
                inner.setdefault(name, []).append(InnerRef.from_node(child))
            elif name == "templateparamlist":
                values["template_param_list"] = TemplateParamList.from_node(child)
            elif name == "sectiondef":
                section_defs.append(SectionDef.from_node(child))
            elif name == "programlisting":
                values["program_listing"] = ProgramListing.from_node(child)
            elif name == "location":
                values["location"] = Location.from_node(child)
            elif name == "listofallmembers":
                for entry in iter_elements(child, label):
                    if entry.name != "member":
                        raise SchemaViolation(entry.name, label)
                    all_members.append(AllMembersEntry.from_node(entry))
            elif name in IGNORED_ELEMENTS:
                continue
            else:
                raise SchemaViolation(name, label)
        if "compound_name" not in values:
            raise MissingChildError(node.name, "compoundname")
        flags = frozenset(
            flag
            for flag in ("final", "inline", "sealed", "abstract")
            if optional_bool(node, flag)
        )
        return cls(
            node.name,
            id=get_attribute_str(node, "id"),
            kind=get_attribute_str(node, "kind"),
            language=optional_str(node, "language"),
            prot=optional_str(node, "prot"),
            flags=flags,
            base_compound_refs=base_refs,
            derived_compound_refs=derived_refs,
            includes=includes,
            included_by=included_by,
            inner=inner,
            section_defs=section_defs,
            all_members=all_members,
            **values,
        )


@dataclass(frozen=True)
class DoxygenFile(Shape):
    """The ``<doxygen>`` root of a compound document."""

    version: str
    compound_defs: list[CompoundDef]
    lang: str | None = None

    @classmethod
    def from_node(cls, node: AttributedNode) -> "DoxygenFile":
        label = shape_label(cls, node)
        if node.name != "doxygen":
            raise SchemaViolation(node.name, label)
        check_attributes(
            node, ("version", "xml:lang", "xsi:noNamespaceSchemaLocation"), label
        )
        compound_defs = []
        for child in iter_elements(node, label):
            if child.name != "compounddef":
                raise SchemaViolation(child.name, label)
            compound_defs.append(CompoundDef.from_node(child))
        return cls(
            node.name,
            version=get_attribute_str(node, "version"),
            compound_defs=compound_defs,
            lang=optional_str(node, "xml:lang"),
        )
