"""
Spreadsheet Reader

Loads .csv and .xlsx uploads (census files, plan catalogues) into
header + row dicts. Cell values come back as stripped strings, except
dates, which stay date / datetime objects.
"""

# Python Packages
import csv
import io
import re
from datetime import date, datetime
from typing import Any, Dict, List, Tuple

import openpyxl

# Exceptions
from .exceptions import ValidationException
from . import messages





def header_key(header) -> str:
    """ 'First Name' / 'first_name' / 'FIRST-NAME' -> 'firstname'... """

    return re.sub(r"[^a-z0-9]", "", str(header or "").lower())


def cell_text(value: Any):
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def load_rows(filename: str, content: bytes) -> Tuple[List[str], List[Dict[str, Any]]]:
    """
    Parse an uploaded spreadsheet into (headers, rows).
    Fully blank rows are dropped.
    """

    suffix = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""

    if suffix == "csv":
        text = content.decode("utf-8-sig", errors = "ignore")

        delimiter = ","
        try:
            delimiter = csv.Sniffer().sniff(text[:2048], delimiters = ",;\t|").delimiter
        except csv.Error:
            delimiter = ","

        reader = csv.DictReader(io.StringIO(text), delimiter = delimiter)
        headers = [header.strip() for header in (reader.fieldnames or [])]
        rows = [
            {key.strip(): cell_text(value) for key, value in row.items() if key is not None}
            for row in reader
        ]

    elif suffix == "xlsx":
        workbook = openpyxl.load_workbook(io.BytesIO(content), data_only = True, read_only = True)
        all_rows = list(workbook.active.iter_rows(values_only = True))
        workbook.close()

        headers = [str(cell).strip() if cell is not None else "" for cell in all_rows[0]] if all_rows else []
        rows = []
        for raw in all_rows[1:]:
            row = {}
            for index, header in enumerate(headers):
                if not header:
                    continue
                row[header] = cell_text(raw[index] if index < len(raw) else None)
            rows.append(row)

    else:
        raise ValidationException(
            message = messages.ERROR["UNSUPPORTED_FILE_FORMAT"].format(
                file_extension = (suffix or "none").upper(),
                supported = "CSV, XLSX"
            )
        )

    rows = [row for row in rows if any(value not in ("", None) for value in row.values())]
    return headers, rows


def remap_rows(headers: List[str], rows: List[Dict[str, Any]], aliases: Dict[str, str]):
    """
    Re-key rows by canonical field name.

    Returns:
        (present fields, remapped rows)
    """

    mapping = {header: aliases.get(header_key(header)) for header in headers}
    present = {field for field in mapping.values() if field}

    remapped = []
    for row in rows:
        record = {}
        for header, value in row.items():
            field = mapping.get(header)
            # First matching column wins when a file carries two aliases
            if field and field not in record:
                record[field] = value
        remapped.append(record)

    return present, remapped
