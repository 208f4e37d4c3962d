"""Resolve named properties and quantities on IFC entities.

Every lookup walks relationship edges (``Decomposes``, ``IsDefinedBy``) and
returns ``None`` when nothing matches.  When several entities match, the
first one in edge traversal order wins: duplicate property-set names are
common in authoring-tool exports and are not treated as errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

import ifcopenshell

from spacereport.errors import InvalidOrientationError
from spacereport.models.mapping import DEFAULT_MAPPING, FieldMapping
from spacereport.models.space import Orientation

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    """The closed set of IFC classes the resolver filters on."""

    STOREY = "IfcBuildingStorey"
    PROPERTY_SET = "IfcPropertySet"
    ELEMENT_QUANTITY = "IfcElementQuantity"
    WINDOW = "IfcWindow"
    DOOR = "IfcDoor"
    SINGLE_VALUE = "IfcPropertySingleValue"
    AREA_QUANTITY = "IfcQuantityArea"
    LENGTH_QUANTITY = "IfcQuantityLength"


class QuantityKind(str, Enum):
    """Quantity types that can be resolved to a number."""

    AREA = "area"
    LENGTH = "length"


# QuantityKind -> (entity kind, attribute holding the measure)
_QUANTITY_ATTRS: dict[QuantityKind, tuple[EntityKind, str]] = {
    QuantityKind.AREA: (EntityKind.AREA_QUANTITY, "AreaValue"),
    QuantityKind.LENGTH: (EntityKind.LENGTH_QUANTITY, "LengthValue"),
}

# Total over Orientation: every member has exactly one mapping field.
_WALL_FINISH_FIELDS: dict[Orientation, str] = {
    Orientation.EAST: "wall_east_property",
    Orientation.NORTH: "wall_north_property",
    Orientation.WEST: "wall_west_property",
    Orientation.SOUTH: "wall_south_property",
}


# ---------------------------------------------------------------------------
# Traversal helpers
# ---------------------------------------------------------------------------


def _of_kind(
    entities: Iterable[ifcopenshell.entity_instance | None],
    kind: EntityKind,
) -> list[ifcopenshell.entity_instance]:
    """Keep the entities that are instances of *kind* (subtypes included)."""
    return [e for e in entities if e is not None and e.is_a(kind.value)]


def _first(entities: list[ifcopenshell.entity_instance]) -> ifcopenshell.entity_instance | None:
    return entities[0] if entities else None


def _relations(entity: ifcopenshell.entity_instance, inverse: str) -> tuple:
    """Return the inverse relationship tuple *inverse*, or an empty tuple."""
    return getattr(entity, inverse, None) or ()


def _property_definitions(
    entity: ifcopenshell.entity_instance,
) -> Iterator[ifcopenshell.entity_instance]:
    """Yield property definitions attached via IfcRelDefinesByProperties.

    IFC4 allows a relationship to point at an ``IfcPropertySetDefinitionSet``;
    its members are yielded in place.
    """
    for rel in _relations(entity, "IsDefinedBy"):
        if not rel.is_a("IfcRelDefinesByProperties"):
            continue
        definition = rel.RelatingPropertyDefinition
        if definition is None:
            continue
        if isinstance(definition, (list, tuple)):
            yield from definition
        elif definition.is_a("IfcPropertySetDefinition"):
            yield definition
        else:
            yield from getattr(definition, "wrappedValue", None) or ()


def _quantities(entity: ifcopenshell.entity_instance) -> list[ifcopenshell.entity_instance]:
    """Flatten the quantities of every element quantity attached to *entity*."""
    quantities: list[ifcopenshell.entity_instance] = []
    for qset in _of_kind(_property_definitions(entity), EntityKind.ELEMENT_QUANTITY):
        quantities.extend(qset.Quantities or ())
    return quantities


def _measure(quantity: ifcopenshell.entity_instance | None, attr: str) -> float | None:
    if quantity is None:
        return None
    value = getattr(quantity, attr, None)
    return float(value) if value is not None else None


# ---------------------------------------------------------------------------
# Core lookups
# ---------------------------------------------------------------------------


def get_storey(space: ifcopenshell.entity_instance) -> ifcopenshell.entity_instance | None:
    """Return the IfcBuildingStorey the space decomposes, or None."""
    parents = [rel.RelatingObject for rel in _relations(space, "Decomposes")]
    return _first(_of_kind(parents, EntityKind.STOREY))


def get_quantity_by_kind(
    product: ifcopenshell.entity_instance,
    kind: QuantityKind,
) -> float | None:
    """Return the first quantity value of *kind* attached to *product*."""
    entity_kind, attr = _QUANTITY_ATTRS[QuantityKind(kind)]
    return _measure(_first(_of_kind(_quantities(product), entity_kind)), attr)


def get_area(product: ifcopenshell.entity_instance) -> float | None:
    """Return the first area quantity of *product*, whatever its name."""
    return get_quantity_by_kind(product, QuantityKind.AREA)


def get_length_quantity(product: ifcopenshell.entity_instance, name: str) -> float | None:
    """Return the first length quantity called *name* (case-insensitive)."""
    wanted = name.lower()
    matches = [
        q
        for q in _of_kind(_quantities(product), EntityKind.LENGTH_QUANTITY)
        if (q.Name or "").lower() == wanted
    ]
    return _measure(_first(matches), "LengthValue")


def get_property_value(
    obj: ifcopenshell.entity_instance,
    pset_name: str,
    prop_name: str,
) -> str | None:
    """Return ``str()`` of a single-value property's nominal value.

    Only the first property set named exactly *pset_name* is searched, and
    within it the first single-value property named exactly *prop_name*.
    """
    psets = [
        p
        for p in _of_kind(_property_definitions(obj), EntityKind.PROPERTY_SET)
        if p.Name == pset_name
    ]
    pset = _first(psets)
    if pset is None:
        return None
    if len(psets) > 1:
        logger.debug(
            "%d property sets named %r on #%d; using the first",
            len(psets),
            pset_name,
            obj.id(),
        )

    props = [
        p
        for p in _of_kind(pset.HasProperties or (), EntityKind.SINGLE_VALUE)
        if p.Name == prop_name
    ]
    prop = _first(props)
    if prop is None or prop.NominalValue is None:
        return None
    return str(prop.NominalValue.wrappedValue)


def iter_property_sets(
    obj: ifcopenshell.entity_instance,
) -> Iterator[tuple[str | None, list[tuple[str | None, Any, bool]]]]:
    """Yield ``(pset_name, [(prop_name, value, is_single_value), ...])``.

    Values of single-value properties are unwrapped.  Any other property
    type (complex, enumerated, bounded, ...) yields ``None`` with
    ``is_single_value`` False.
    """
    for pset in _of_kind(_property_definitions(obj), EntityKind.PROPERTY_SET):
        props: list[tuple[str | None, Any, bool]] = []
        for prop in pset.HasProperties or ():
            if not prop.is_a(EntityKind.SINGLE_VALUE.value):
                props.append((prop.Name, None, False))
                continue
            nominal = prop.NominalValue
            props.append((prop.Name, nominal.wrappedValue if nominal is not None else None, True))
        yield pset.Name, props


# ---------------------------------------------------------------------------
# Field shortcuts
# ---------------------------------------------------------------------------


def get_related_zone_number(
    element: ifcopenshell.entity_instance,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> str | None:
    return get_property_value(element, mapping.zone_pset, mapping.zone_property)


def get_floor_material(
    space: ifcopenshell.entity_instance,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> str | None:
    return get_property_value(space, mapping.finishes_pset, mapping.floor_property)


def get_ceiling_material(
    space: ifcopenshell.entity_instance,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> str | None:
    return get_property_value(space, mapping.finishes_pset, mapping.ceiling_property)


def get_skirting(
    space: ifcopenshell.entity_instance,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> str | None:
    return get_property_value(space, mapping.finishes_pset, mapping.skirting_property)


def get_perimeter(
    space: ifcopenshell.entity_instance,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> float | None:
    return get_length_quantity(space, mapping.perimeter_quantity)


def to_orientation(value: Orientation | str) -> Orientation:
    """Coerce *value* to an Orientation or raise InvalidOrientationError."""
    if isinstance(value, Orientation):
        return value
    try:
        return Orientation(value)
    except (ValueError, TypeError) as exc:
        raise InvalidOrientationError(f"Unknown wall orientation: {value!r}") from exc


def get_wall_finish(
    space: ifcopenshell.entity_instance,
    orientation: Orientation | str,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> str | None:
    """Return the wall finish for one orientation.

    An unknown orientation is a programming error and raises
    :class:`InvalidOrientationError`; it is never reported as missing data.
    """
    field = _WALL_FINISH_FIELDS[to_orientation(orientation)]
    return get_property_value(space, mapping.finishes_pset, getattr(mapping, field))
