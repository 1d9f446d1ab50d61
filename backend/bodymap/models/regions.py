"""Region geometry and the static catalog it is built from.

The catalog is a JSON document of path strings keyed by body and region. Every
string is parsed once when the catalog loads; the resulting geometry is never
mutated afterwards.
"""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass
from pathlib import Path as FilePath
from typing import Iterator

from pydantic import BaseModel, Field

from bodymap.svg.parser import parse_path_data
from bodymap.svg.primitives import Path

logger = logging.getLogger(__name__)


class Gender(str, enum.Enum):
    MAN = "man"
    WOMAN = "woman"


class BodySide(str, enum.Enum):
    ANTERIOR = "anterior"
    POSTERIOR = "posterior"


class BodySection(str, enum.Enum):
    UPPER = "upper"
    LOWER = "lower"
    FULL = "full"


class LateralSide(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"


def selection_key(gender: Gender, side: BodySide, section: BodySection) -> str:
    """Key identifying one distinct set of regions, e.g. ``"man-anterior-full"``."""
    return f"{gender.value}-{side.value}-{section.value}"


def body_key(gender: Gender, side: BodySide) -> str:
    return f"{gender.value}-{side.value}"


@dataclass(frozen=True)
class RegionGeometry:
    """One region's paths, split into laterality groups."""

    region_id: str
    common: tuple[Path, ...] = ()
    left: tuple[Path, ...] = ()
    right: tuple[Path, ...] = ()

    @classmethod
    def from_strings(
        cls,
        region_id: str,
        common: list[str] | tuple[str, ...] = (),
        left: list[str] | tuple[str, ...] = (),
        right: list[str] | tuple[str, ...] = (),
    ) -> RegionGeometry:
        return cls(
            region_id=region_id,
            common=tuple(parse_path_data(d) for d in common),
            left=tuple(parse_path_data(d) for d in left),
            right=tuple(parse_path_data(d) for d in right),
        )

    def groups(self) -> Iterator[tuple[LateralSide | None, tuple[Path, ...]]]:
        """Laterality groups in test/draw order: common, left, right."""
        yield None, self.common
        yield LateralSide.LEFT, self.left
        yield LateralSide.RIGHT, self.right

    def all_paths(self) -> tuple[Path, ...]:
        return self.common + self.left + self.right


# ── Static definition schema ──


class RegionPathsDef(BaseModel):
    common: list[str] = Field(default_factory=list)
    left: list[str] = Field(default_factory=list)
    right: list[str] = Field(default_factory=list)


class BodyDef(BaseModel):
    border: str | None = None
    # Dict order is draw order.
    regions: dict[str, RegionPathsDef] = Field(default_factory=dict)


class CatalogDef(BaseModel):
    sections: dict[BodySide, dict[BodySection, list[str]]] = Field(default_factory=dict)
    groups: dict[str, list[str]] = Field(default_factory=dict)
    bodies: dict[str, BodyDef] = Field(default_factory=dict)


@dataclass(frozen=True)
class Body:
    key: str
    border: Path | None
    regions: dict[str, RegionGeometry]


class RegionCatalog:
    """Parsed region geometry for every body, plus section and group membership."""

    def __init__(self, definition: CatalogDef) -> None:
        self.sections = definition.sections
        self.groups: dict[str, frozenset[str]] = {
            name: frozenset(members) for name, members in definition.groups.items()
        }
        self.bodies: dict[str, Body] = {}
        for key, body_def in definition.bodies.items():
            regions = {
                region_id: RegionGeometry.from_strings(region_id, rd.common, rd.left, rd.right)
                for region_id, rd in body_def.regions.items()
            }
            border = parse_path_data(body_def.border) if body_def.border else None
            self.bodies[key] = Body(key=key, border=border, regions=regions)

        logger.info(
            "Region catalog: %d bodies, %d regions, %d groups",
            len(self.bodies),
            self.region_count,
            len(self.groups),
        )

    @classmethod
    def from_dict(cls, data: dict) -> RegionCatalog:
        return cls(CatalogDef.model_validate(data))

    @classmethod
    def load(cls, path: str | FilePath) -> RegionCatalog:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("Loading region catalog from %s", path)
        return cls.from_dict(data)

    @property
    def region_count(self) -> int:
        return sum(len(b.regions) for b in self.bodies.values())

    def body(self, gender: Gender, side: BodySide) -> Body:
        """Raises KeyError when the catalog has no artwork for this body."""
        return self.bodies[body_key(gender, side)]

    def border(self, gender: Gender, side: BodySide) -> Path | None:
        return self.body(gender, side).border

    def regions_for(self, gender: Gender, side: BodySide, section: BodySection) -> list[RegionGeometry]:
        """Regions for a selection in draw order.

        ``full`` is every region of the body in definition order; ``upper`` and
        ``lower`` follow the section list, skipping regions the body lacks.
        """
        regions = self.body(gender, side).regions
        if section is BodySection.FULL:
            return list(regions.values())
        ids = self.sections.get(side, {}).get(section, [])
        return [regions[rid] for rid in ids if rid in regions]

    def group_members(self, group: str) -> frozenset[str]:
        return self.groups.get(group, frozenset())

    def groups_of(self, region_id: str) -> list[str]:
        return [name for name, members in self.groups.items() if region_id in members]
