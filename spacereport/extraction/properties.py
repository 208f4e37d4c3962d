"""Dump raw property sets, for checking which names a model actually uses."""

from __future__ import annotations

import ifcopenshell

from spacereport.config import SPACE_CLASS
from spacereport.extraction.resolver import iter_property_sets


def describe_first_space(model: ifcopenshell.file) -> list[str]:
    """Return the debug listing printed by ``spacereport --debug``.

    Lists every property set of the first IfcSpace with its properties.
    Properties that are not single values (complex, enumerated, ...) are
    shown as ``(Complex Property)``.
    """
    spaces = model.by_type(SPACE_CLASS)
    if not spaces:
        return ["No spaces found in the IFC file."]

    space = spaces[0]
    lines = [f"--- DEBUG: Properties for Space {space.Name} ---"]
    for pset_name, props in iter_property_sets(space):
        lines.append(f"  PropertySet: {pset_name}")
        for prop_name, value, is_single_value in props:
            shown = value if is_single_value else "(Complex Property)"
            lines.append(f"    Property: {prop_name}, Value: {shown}")
    return lines
