import csv
from typing import Iterable, List, Optional
from .exceptions import ManifestError
from .models import ManifestRecord, SeatInput


class ManifestLoader:
    """
    Loads venue manifest records from CSV.

    Expected columns: section_id, section_name, row_id, row_name.
    Suites leave row_id (and usually row_name) empty.
    """
    REQUIRED_COLUMNS = ("section_id", "section_name", "row_id", "row_name")

    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def load_records(self) -> List[ManifestRecord]:
        records: List[ManifestRecord] = []

        try:
            with open(self.csv_path, newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                _require_columns(reader.fieldnames, self.REQUIRED_COLUMNS, self.csv_path)
                for row in reader:
                    records.append(self._parse_row(row))
        except (UnicodeDecodeError, csv.Error) as e:
            raise ManifestError(f"Could not parse {self.csv_path} as UTF-8 CSV: {e}") from e

        return records

    def _parse_row(self, row: dict) -> ManifestRecord:
        return ManifestRecord(
            section_id=_clean_text(row.get("section_id")),
            section_name=_clean_text(row.get("section_name")) or "",
            row_id=_clean_text(row.get("row_id")),
            row_name=_clean_text(row.get("row_name")),
        )


class SeatInputLoader:
    """
    Loads (section, row) ticket inputs from CSV.

    An empty row cell is kept as "" since it marks a suite.
    """
    REQUIRED_COLUMNS = ("section", "row")

    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def load_inputs(self) -> List[SeatInput]:
        inputs: List[SeatInput] = []

        try:
            with open(self.csv_path, newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                _require_columns(reader.fieldnames, self.REQUIRED_COLUMNS, self.csv_path)
                for row in reader:
                    inputs.append(
                        SeatInput(
                            section=(row.get("section") or "").strip(),
                            row=(row.get("row") or "").strip(),
                        )
                    )
        except (UnicodeDecodeError, csv.Error) as e:
            raise ManifestError(f"Could not parse {self.csv_path} as UTF-8 CSV: {e}") from e

        return inputs


def _require_columns(fieldnames: Optional[Iterable[str]], required, path: str) -> None:
    present = set(fieldnames or [])
    missing = [c for c in required if c not in present]
    if missing:
        raise ManifestError(f"{path} is missing required columns: {', '.join(missing)}")


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value if value else None
