"""Synthetic IFC models shared by the spacereport tests.

Models are built in memory with ifcopenshell's API.  Property sets and
quantity sets are created entity by entity so tests control their exact
order, duplicates included.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ifcopenshell
import ifcopenshell.api
import ifcopenshell.guid
import pytest

_QUANTITY_CLASSES = {
    "area": ("IfcQuantityArea", "AreaValue"),
    "length": ("IfcQuantityLength", "LengthValue"),
    "volume": ("IfcQuantityVolume", "VolumeValue"),
}


class IfcBuilder:
    """Small helper around an in-memory IFC4 file."""

    def __init__(self, schema: str = "IFC4") -> None:
        self.file = ifcopenshell.file(schema=schema)
        self.project = self._create("IfcProject", "SyntheticProject")
        site = self._create("IfcSite", "TestSite")
        self.building = self._create("IfcBuilding", "TestBuilding")
        self._aggregate(site, self.project)
        self._aggregate(self.building, site)

    def _create(self, ifc_class: str, name: str | None) -> ifcopenshell.entity_instance:
        entity = ifcopenshell.api.run(
            "root.create_entity", self.file, ifc_class=ifc_class, name=name
        )
        entity.Name = name
        return entity

    def _aggregate(
        self,
        product: ifcopenshell.entity_instance,
        parent: ifcopenshell.entity_instance,
    ) -> None:
        ifcopenshell.api.run(
            "aggregate.assign_object", self.file, products=[product], relating_object=parent
        )

    def _define(
        self,
        product: ifcopenshell.entity_instance,
        definition: ifcopenshell.entity_instance,
    ) -> None:
        self.file.create_entity(
            "IfcRelDefinesByProperties",
            GlobalId=ifcopenshell.guid.new(),
            RelatedObjects=[product],
            RelatingPropertyDefinition=definition,
        )

    def _nominal(self, value: Any) -> ifcopenshell.entity_instance | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return self.file.create_entity("IfcBoolean", value)
        if isinstance(value, int):
            return self.file.create_entity("IfcInteger", value)
        if isinstance(value, float):
            return self.file.create_entity("IfcReal", value)
        return self.file.create_entity("IfcLabel", str(value))

    # -- spatial structure ---------------------------------------------------

    def storey(self, name: str | None = "Level 1") -> ifcopenshell.entity_instance:
        storey = self._create("IfcBuildingStorey", name)
        self._aggregate(storey, self.building)
        return storey

    def space(
        self,
        name: str | None,
        *,
        long_name: str | None = None,
        storey: ifcopenshell.entity_instance | None = None,
    ) -> ifcopenshell.entity_instance:
        space = self._create("IfcSpace", name)
        space.LongName = long_name
        if storey is not None:
            self._aggregate(space, storey)
        return space

    def window(
        self,
        name: str | None,
        *,
        zone: str | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> ifcopenshell.entity_instance:
        return self._opening("IfcWindow", name, zone, width, height)

    def door(
        self,
        name: str | None,
        *,
        zone: str | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> ifcopenshell.entity_instance:
        return self._opening("IfcDoor", name, zone, width, height)

    def _opening(self, ifc_class, name, zone, width, height) -> ifcopenshell.entity_instance:
        opening = self._create(ifc_class, name)
        opening.OverallWidth = width
        opening.OverallHeight = height
        if zone is not None:
            self.add_pset(opening, "ArchiCADProperties", {"Related Zone Number": zone})
        return opening

    # -- properties and quantities -------------------------------------------

    def add_pset(
        self,
        product: ifcopenshell.entity_instance,
        name: str,
        properties: dict[str, Any],
    ) -> ifcopenshell.entity_instance:
        props = [
            self.file.create_entity(
                "IfcPropertySingleValue", Name=key, NominalValue=self._nominal(value)
            )
            for key, value in properties.items()
        ]
        pset = self.file.create_entity(
            "IfcPropertySet",
            GlobalId=ifcopenshell.guid.new(),
            Name=name,
            HasProperties=props,
        )
        self._define(product, pset)
        return pset

    def add_complex_pset(
        self,
        product: ifcopenshell.entity_instance,
        name: str,
    ) -> ifcopenshell.entity_instance:
        """Attach a set holding one complex and one single-value property."""
        inner = self.file.create_entity(
            "IfcPropertySingleValue", Name="Inner", NominalValue=self._nominal("x")
        )
        complex_prop = self.file.create_entity(
            "IfcComplexProperty", Name="Layers", UsageName="Layers", HasProperties=[inner]
        )
        simple = self.file.create_entity(
            "IfcPropertySingleValue", Name="Simple", NominalValue=self._nominal("yes")
        )
        pset = self.file.create_entity(
            "IfcPropertySet",
            GlobalId=ifcopenshell.guid.new(),
            Name=name,
            HasProperties=[complex_prop, simple],
        )
        self._define(product, pset)
        return pset

    def add_qto(
        self,
        product: ifcopenshell.entity_instance,
        quantities: list[tuple[str, str, float]],
        name: str = "BaseQuantities",
    ) -> ifcopenshell.entity_instance:
        """Attach an IfcElementQuantity from ``(kind, name, value)`` triples."""
        created = []
        for kind, qname, value in quantities:
            ifc_class, attr = _QUANTITY_CLASSES[kind]
            created.append(self.file.create_entity(ifc_class, Name=qname, **{attr: value}))
        qto = self.file.create_entity(
            "IfcElementQuantity",
            GlobalId=ifcopenshell.guid.new(),
            Name=name,
            Quantities=created,
        )
        self._define(product, qto)
        return qto

    def finishes(self, space: ifcopenshell.entity_instance, **overrides: str) -> None:
        """Attach the PavCusPropZones finish set with sensible defaults."""
        values = {
            "02FloorType": "Oak parquet",
            "01CeilingType": "Gypsum board",
            "0301FinishWallEastType": "Paint white",
            "0302FinishWallNorthType": "Ceramic tiles",
            "0303FinishWallWestType": "Paint grey",
            "0304FinishWallSouthType": "Wood panels",
            "04WallPerimeterSet": "MDF skirting",
        }
        values.update(overrides)
        self.add_pset(space, "PavCusPropZones", values)

    def write(self, path: Path) -> Path:
        self.file.write(str(path))
        return path


def build_sample_model() -> IfcBuilder:
    """Return a model covering the main report cases.

    - "101": area 12.34 only, no storey, no finishes, two windows.
    - "102": on "Level 1", all quantities and finishes, one window, one door.
    - one unnamed space.
    - a window tagged "999" (no such space) and a door with no zone key.
    """
    b = IfcBuilder()
    level = b.storey("Level 1")

    s101 = b.space("101", long_name="Office")
    b.add_qto(s101, [("area", "NetFloorArea", 12.34)])

    s102 = b.space("102", long_name="Kitchen", storey=level)
    b.add_qto(
        s102,
        [
            ("area", "NetFloorArea", 20.5),
            ("length", "Height", 3.0),
            ("length", "ZoneCeilingHeight", 2.7),
            ("length", "Zone Net Perimeter", 18.2),
        ],
    )
    b.finishes(s102)

    b.space(None)

    b.window("W-01", zone="101", width=1.2, height=1.5)
    b.window("W-02", zone="101", width=0.8, height=1.5)
    b.window("W-03", zone="102", width=2.0, height=1.2)
    b.window("W-99", zone="999", width=1.0, height=1.0)
    b.door("D-01", zone="102", width=0.9, height=2.1)
    b.door("D-XX", width=0.9, height=2.1)
    return b


@pytest.fixture()
def builder() -> IfcBuilder:
    return IfcBuilder()


@pytest.fixture()
def sample_model() -> ifcopenshell.file:
    return build_sample_model().file


@pytest.fixture()
def sample_ifc(tmp_path: Path) -> Path:
    """Write the sample model to a temp file and return its path."""
    return build_sample_model().write(tmp_path / "sample.ifc")
