"""
PDF Form Service

Reads the form widgets of a template and fills them (PyPDF2).
"""

# Python Packages
from io import BytesIO
from typing import Dict, List

from PyPDF2 import PdfReader, PdfWriter
from PyPDF2.errors import PdfReadError
from PyPDF2.generic import BooleanObject, NameObject

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages

FIELD_TYPES = {
    "/Tx": "text",
    "/Btn": "checkbox",
    "/Sig": "signature",
    "/Ch": "choice"
}





def open_pdf(content: bytes) -> PdfReader:
    """
    Raises:
        ValidationException: not a readable PDF
    """

    try:
        reader = PdfReader(BytesIO(content))
        # Page tree is parsed lazily; touch it so broken files fail here
        len(reader.pages)
        return reader

    except (PdfReadError, ValueError, KeyError, TypeError) as error:
        raise ValidationException(message = messages.ERROR["PDF_TEMPLATE_INVALID"], details = str(error))


def _widgets(page):
    for annotation in page.get("/Annots") or []:
        widget = annotation.get_object()
        if widget.get("/Subtype") == "/Widget":
            yield widget


def _field_attribute(widget, key):
    """ Widget attribute, falling back to the parent field dictionary... """

    if key in widget:
        return widget[key]

    parent = widget.get("/Parent")
    return parent.get_object().get(key) if parent is not None else None


def detect_fields(content: bytes) -> List[dict]:
    """
    Form widgets of a PDF as {name, page, rect, type}; pages count from 1
    """

    reader = open_pdf(content)
    fields = []

    for page_number, page in enumerate(reader.pages, start = 1):
        for widget in _widgets(page):
            name = _field_attribute(widget, "/T")
            if name is None:
                continue

            rect = [round(float(value), 2) for value in widget.get("/Rect", [])]

            fields.append({
                "name": str(name),
                "page": page_number,
                "rect": rect,
                "type": FIELD_TYPES.get(str(_field_attribute(widget, "/FT")), "unknown")
            })

    return fields


def fill_form(content: bytes, values: Dict[str, str], checkboxes = ()) -> bytes:
    """
    Write `values` into the template's fields and return the new PDF.
    Field names in `checkboxes` get /V and /AS set as PDF names.
    """

    reader = open_pdf(content)

    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(page)

    # Widgets came over with the pages; the form dictionary must point at those copies
    root = reader.trailer["/Root"]
    if "/AcroForm" in root:
        writer._root_object[NameObject("/AcroForm")] = root.raw_get("/AcroForm").clone(writer)

    text_values = {name: value for name, value in values.items() if name not in checkboxes}

    for page in writer.pages:
        if "/Annots" not in page:
            continue

        if text_values:
            writer.update_page_form_field_values(page, text_values)

        for widget in _widgets(page):
            name = _field_attribute(widget, "/T")
            if name is None or str(name) not in checkboxes:
                continue

            state = NameObject(values[str(name)])
            widget[NameObject("/AS")] = state

            if "/T" in widget:
                widget[NameObject("/V")] = state
            else:
                widget["/Parent"].get_object()[NameObject("/V")] = state

    if "/AcroForm" in writer._root_object:
        writer._root_object["/AcroForm"][NameObject("/NeedAppearances")] = BooleanObject(True)

    output = BytesIO()
    writer.write(output)
    return output.getvalue()
