"""Flat-file persistence for patient records.

Record file layout is nine newline-terminated lines per patient, in this
order::

    id
    name
    age
    gender
    address
    illness
    doctor
    admission_date
    is_discharged   (0 or 1)

Values are written verbatim with no escaping, so a value containing a
newline corrupts the file. The layout is kept for compatibility with
existing ``patient_records.txt`` files.

The report file is a separate, human-readable, write-only rendering.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .errors import PersistenceError
from .models import Patient

logger = logging.getLogger(__name__)

LINES_PER_RECORD = 9
REPORT_DIVIDER = "=" * 36


# =============================================================================
# Record file
# =============================================================================


def encode_records(patients: Iterable[Patient]) -> str:
    """Render *patients* in the nine-line record layout."""
    lines: list[str] = []
    for p in patients:
        lines.extend([
            str(p.id),
            p.name,
            str(p.age),
            p.gender,
            p.address,
            p.illness,
            p.doctor,
            p.admission_date,
            "1" if p.is_discharged else "0",
        ])
    return "".join(f"{line}\n" for line in lines)


def _decode_record(chunk: list[str]) -> Patient:
    """Parse one nine-line chunk. Raises ValueError if it does not parse.

    Only the numeric fields and the discharge flag are coerced. Age range
    and gender are admission-time rules and are not re-checked here.
    """
    (raw_id, name, raw_age, gender, address, illness, doctor,
     admission_date, raw_discharged) = chunk
    if raw_discharged.strip() not in ("0", "1"):
        raise ValueError(f"bad discharge flag {raw_discharged!r}")
    return Patient.model_construct(
        id=int(raw_id.strip()),
        name=name,
        age=int(raw_age.strip()),
        gender=gender,
        address=address,
        illness=illness,
        doctor=doctor,
        admission_date=admission_date,
        is_discharged=raw_discharged.strip() == "1",
    )


def decode_records(text: str) -> list[Patient]:
    """Parse record-file text into patients.

    Records are read in order until the text runs out. A short or
    unparsable record ends the read: everything before it is returned and
    the remainder is dropped with a warning.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    patients: list[Patient] = []
    for start in range(0, len(lines), LINES_PER_RECORD):
        chunk = lines[start:start + LINES_PER_RECORD]
        if len(chunk) < LINES_PER_RECORD:
            logger.warning(
                "Dropping truncated record at line %d (%d of %d lines present)",
                start + 1, len(chunk), LINES_PER_RECORD,
            )
            break
        try:
            patients.append(_decode_record(chunk))
        except ValueError as e:
            logger.warning(
                "Stopped reading at malformed record on line %d: %s; "
                "%d trailing line(s) ignored",
                start + 1, e, len(lines) - start,
            )
            break
    return patients


def load_records(path: str | Path) -> list[Patient]:
    """Load patients from the record file at *path*.

    A missing file is the first-run case and yields an empty list.

    Raises:
        PersistenceError: if the file exists but cannot be read.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No record file at %s, starting empty", path)
        return []
    try:
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path, e)
        raise PersistenceError("Cannot read record file", path) from e

    patients = decode_records(text)
    logger.info("Loaded %d patient record(s) from %s", len(patients), path)
    return patients


def _write_atomic(path: Path, text: str) -> None:
    """Write *text* to *path* via a temp file and rename."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8", newline="")
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def save_records(patients: Iterable[Patient], path: str | Path) -> None:
    """Overwrite the record file at *path* with *patients* in order.

    Raises:
        PersistenceError: if the file cannot be written.
    """
    path = Path(path)
    patients = list(patients)
    try:
        _write_atomic(path, encode_records(patients))
    except OSError as e:
        logger.error("Failed to save records to %s: %s", path, e)
        raise PersistenceError("Cannot write record file", path) from e
    logger.info("Saved %d patient record(s) to %s", len(patients), path)


# =============================================================================
# Report file
# =============================================================================


def format_report(patients: Iterable[Patient]) -> str:
    """Render the human-readable report, one labeled block per patient."""
    blocks = []
    for p in patients:
        blocks.append(
            f"ID: {p.id}\n"
            f"Name: {p.name}\n"
            f"Age: {p.age}\n"
            f"Gender: {p.gender}\n"
            f"Address: {p.address}\n"
            f"Illness: {p.illness}\n"
            f"Doctor: {p.doctor}\n"
            f"Admission Date: {p.admission_date}\n"
            f"Discharged: {'Yes' if p.is_discharged else 'No'}\n"
            f"{REPORT_DIVIDER}\n"
        )
    return "".join(blocks)


def write_report(patients: Iterable[Patient], path: str | Path) -> None:
    """Overwrite the report file at *path*.

    Raises:
        PersistenceError: if the file cannot be written.
    """
    path = Path(path)
    try:
        path.write_text(format_report(patients), encoding="utf-8", newline="")
    except OSError as e:
        logger.error("Failed to write report to %s: %s", path, e)
        raise PersistenceError("Cannot write report file", path) from e
    logger.info("Wrote patient report to %s", path)
