"""Validation helpers shared by report use cases."""

REPORT_NOT_FOUND = "Reporte no encontrado"


def normalize_required_text(value: str | None, label: str) -> str:
    """Return ``value`` stripped, or raise when it is blank."""

    cleaned = (value or "").strip()
    if not cleaned:
        raise ValueError(f"{label} es obligatorio")
    return cleaned
