"""Captions and placeholders used by the report renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from spacereport.errors import ConfigError
from spacereport.models.space import Orientation


class ReportLabels(BaseModel):
    """Every piece of fixed text that appears in a space report."""

    model_config = ConfigDict(frozen=True)

    language: str = "en"
    title: str = "Space Report"
    not_available: str = "N/A"
    missing_name: str = "—"

    basic_info: str = "Basic Information"
    attribute: str = "Attribute"
    value: str = "Value"
    storey: str = "Storey"
    area: str = "Area"
    gross_height: str = "Gross Height"
    net_height: str = "Net Height"
    perimeter: str = "Perimeter"

    materials: str = "Materials & Finishes"
    surface: str = "Surface"
    finish: str = "Material/Finish"
    orientation: str = "Orientation"
    floor: str = "Floor"
    ceiling: str = "Ceiling"
    wall: str = "Wall"
    skirting: str = "Skirting"
    east: str = "E"
    north: str = "N"
    west: str = "W"
    south: str = "S"

    openings: str = "Openings"
    opening_type: str = "Type"
    opening_name: str = "Name"
    dimensions: str = "Dimensions"
    window: str = "Window"
    door: str = "Door"

    page: str = "Page"
    generated: str = "Generated"
    footer_note: str = "Automated IFC processing"

    def compass(self, orientation: Orientation) -> str:
        """Return the one-letter compass label for *orientation*."""
        return getattr(self, Orientation(orientation).value)


ENGLISH = ReportLabels()

GREEK = ReportLabels(
    language="el",
    title="Αναφορά Χώρου",
    not_available="Μη διαθέσιμο",
    basic_info="Βασικά Στοιχεία",
    attribute="Χαρακτηριστικό",
    value="Τιμή",
    storey="Όροφος",
    area="Εμβαδόν",
    gross_height="Μεικτό Ύψος",
    net_height="Καθαρό Ύψος",
    perimeter="Περίμετρος",
    materials="Υλικά & Φινιρίσματα",
    surface="Επιφάνεια",
    finish="Υλικό/Φινίρισμα",
    orientation="Προσανατολισμός",
    floor="Δάπεδο",
    ceiling="Οροφή",
    wall="Τοίχος",
    skirting="Περιθώριο",
    east="Α",
    north="Β",
    west="Δ",
    south="Ν",
    openings="Κουφώματα",
    opening_type="Τύπος",
    opening_name="Όνομα",
    dimensions="Διαστάσεις",
    window="Παράθυρο",
    door="Πόρτα",
    page="Σελίδα",
    generated="Δημιουργήθηκε",
    footer_note="Αυτόματη επεξεργασία IFC",
)

LABELS: dict[str, ReportLabels] = {
    ENGLISH.language: ENGLISH,
    GREEK.language: GREEK,
}


def get_labels(language: str) -> ReportLabels:
    """Return the built-in label set for *language* (``"en"`` or ``"el"``)."""
    try:
        return LABELS[language.lower()]
    except KeyError:
        raise ConfigError(
            f"Unsupported report language {language!r}; "
            f"choose one of {', '.join(sorted(LABELS))}"
        ) from None
