"""Logic for regrouping a compound's members into display sections."""

import logging
import re
from dataclasses import dataclass, field

from doxygen_to_docusaurus.compound_shapes import MemberDef, SectionDef, SectionMember
from doxygen_to_docusaurus.description_shapes import DescriptionBlock
from doxygen_to_docusaurus.header_slug import header_slug

logger = logging.getLogger(__name__)

USER_DEFINED = "user-defined"
UNKNOWN_SECTION_ORDER = 999

OPERATOR_FOLLOWERS = ' =!<>+-*/%&|^~,"(['

# kind -> (title, order)
SECTION_HEADERS: dict[str, tuple[str, int]] = {
    "typedef": ("Typedefs", 100),
    "public-type": ("Public Member Typedefs", 110),
    "protected-type": ("Protected Member Typedefs", 120),
    "private-type": ("Private Member Typedefs", 130),
    "package-type": ("Package Member Typedefs", 140),
    "enum": ("Enumerations", 150),
    "friend": ("Friends", 160),
    "interface": ("Interfaces", 170),
    "constructor": ("Constructors", 200),
    "public-constructor": ("Public Constructors", 200),
    "protected-constructor": ("Protected Constructors", 210),
    "private-constructor": ("Private Constructors", 220),
    "public-destructor": ("Public Destructor", 230),
    "protected-destructor": ("Protected Destructor", 240),
    "private-destructor": ("Private Destructor", 250),
    "operator": ("Operators", 300),
    "public-operator": ("Public Operators", 310),
    "protected-operator": ("Protected Operators", 320),
    "private-operator": ("Private Operators", 330),
    "package-operator": ("Package Operators", 340),
    "func": ("Functions", 350),
    "function": ("Functions", 350),
    "public-func": ("Public Member Functions", 360),
    "protected-func": ("Protected Member Functions", 370),
    "private-func": ("Private Member Functions", 380),
    "package-func": ("Package Member Functions", 390),
    "var": ("Variables", 400),
    "variable": ("Variables", 400),
    "public-attrib": ("Public Member Attributes", 410),
    "protected-attrib": ("Protected Member Attributes", 420),
    "private-attrib": ("Private Member Attributes", 430),
    "package-attrib": ("Package Member Attributes", 440),
    "public-static-operator": ("Public Operators", 450),
    "protected-static-operator": ("Protected Operators", 460),
    "private-static-operator": ("Private Operators", 470),
    "package-static-operator": ("Package Operators", 480),
    "public-static-func": ("Public Static Functions", 500),
    "protected-static-func": ("Protected Static Functions", 510),
    "private-static-func": ("Private Static Functions", 520),
    "package-static-func": ("Package Static Functions", 530),
    "public-static-attrib": ("Public Static Attributes", 600),
    "protected-static-attrib": ("Protected Static Attributes", 610),
    "private-static-attrib": ("Private Static Attributes", 620),
    "package-static-attrib": ("Package Static Attributes", 630),
    "slot": ("Slots", 700),
    "public-slot": ("Public Slots", 700),
    "protected-slot": ("Protected Slot", 710),
    "private-slot": ("Private Slot", 720),
    "related": ("Related", 800),
    "define": ("Macro Definitions", 810),
    "prototype": ("Prototypes", 820),
    "signal": ("Signals", 830),
    "dcop": ("DCOP Functions", 840),
    "property": ("Properties", 850),
    "event": ("Events", 860),
    "service": ("Services", 870),
    USER_DEFINED: ("Definitions", 1000),
}


@dataclass(frozen=True)
class Member:
    """A member defined in the compound being rendered."""

    definition: MemberDef

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def kind(self) -> str:
        return self.definition.kind

    @property
    def protection(self) -> str:
        return self.definition.prot

    @property
    def labels(self) -> list[str]:
        """Qualifier badges shown next to the member, in display order."""
        md = self.definition
        args = md.argsstring or ""
        labels = [
            flag
            for flag in ("inline", "explicit", "nodiscard", "constexpr", "noexcept")
            if md.has_flag(flag)
        ]
        if md.prot == "protected":
            labels.append("protected")
        if md.has_flag("static"):
            labels.append("static")
        if md.virt == "virtual":
            labels.append("virtual")
        if args.endswith("=delete"):
            labels.append("delete")
        if args.endswith("=default"):
            labels.append("default")
        labels.extend(f for f in ("strong", "mutable") if md.has_flag(f))
        return labels


@dataclass(frozen=True)
class MemberRef:
    """A member listed here but defined in another compound."""

    entry: SectionMember

    @property
    def id(self) -> str:
        return self.entry.refid

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def kind(self) -> str:
        return self.entry.kind


@dataclass
class Section:
    """An ordered group of members sharing one canonical kind."""

    kind: str
    header: str | None = None
    description: DescriptionBlock | None = None
    members: list[Member | MemberRef] = field(default_factory=list)

    @property
    def title(self) -> str:
        if self.header:
            return self.header
        return SECTION_HEADERS.get(self.kind, (self.kind, 0))[0]

    @property
    def order(self) -> int:
        if self.kind in SECTION_HEADERS:
            return SECTION_HEADERS[self.kind][1]
        return UNKNOWN_SECTION_ORDER

    @property
    def anchor(self) -> str:
        return header_slug(self.title)


def is_operator(name: str) -> bool:
    """Return True for C++ operator names such as ``operator==``."""
    return (
        name.startswith("operator")
        and len(name) > len("operator")
        and name[len("operator")] in OPERATOR_FOLLOWERS
    )


def compute_adjusted_kind(
    section_kind: str, section_suffix: str, member_suffix: str | None = None
) -> str:
    """Combine a section kind with a member category.

    ``public-func`` with suffix ``operator`` gives ``public-operator``;
    kinds without a visibility prefix fall back to ``member_suffix``.
    """
    member_suffix = member_suffix or section_suffix
    if section_kind == USER_DEFINED:
        return member_suffix
    if "-" in section_kind:
        return re.sub(r"-[a-z]+$", "-", section_kind) + section_suffix
    return member_suffix


def adjust_member_kind(
    section_kind: str, member: Member | MemberRef, class_name: str | None
) -> str:
    """Return the canonical section kind a member belongs in."""
    kind = member.kind
    name = member.name
    if kind == "function":
        if is_operator(name):
            return compute_adjusted_kind(section_kind, "operator")
        if class_name is not None:
            if name == class_name:
                return compute_adjusted_kind(section_kind, "constructor")
            if name.replace("~", "", 1) == class_name:
                return compute_adjusted_kind(section_kind, "destructor")
        return compute_adjusted_kind(section_kind, "func", "function")
    if kind == "variable":
        return compute_adjusted_kind(section_kind, "attrib", "variable")
    if kind == "typedef":
        return compute_adjusted_kind(section_kind, "type", "typedef")
    if kind == "slot":
        return compute_adjusted_kind(section_kind, "slot")
    return kind


def organize_sections(
    section_defs: list[SectionDef], class_name: str | None = None
) -> list[Section]:
    """Regroup raw ``sectiondef``s into canonically ordered sections.

    User-defined sections with a header keep their members and order; all
    other members are merged into one synthetic section per adjusted kind.
    """
    result: list[Section] = []
    by_kind: dict[str, Section] = {}
    for section_def in section_defs:
        if section_def.kind == USER_DEFINED and section_def.header is not None:
            members: list[Member | MemberRef] = [
                Member(md) for md in section_def.member_defs
            ]
            members.extend(MemberRef(m) for m in section_def.members)
            result.append(
                Section(
                    kind=USER_DEFINED,
                    header=section_def.header,
                    description=section_def.description,
                    members=members,
                )
            )
            continue
        grouped: list[Member | MemberRef] = [
            Member(md) for md in section_def.member_defs
        ]
        grouped.extend(MemberRef(m) for m in section_def.members)
        for member in grouped:
            kind = adjust_member_kind(section_def.kind, member, class_name)
            if kind not in SECTION_HEADERS:
                logger.warning("Unknown section kind %s for %s", kind, member.id)
            by_kind.setdefault(kind, Section(kind=kind)).members.append(member)
    result.extend(by_kind.values())
    # sorted() is stable: equal orders keep their first-appearance order.
    return sorted(result, key=lambda section: section.order)
