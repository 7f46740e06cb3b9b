"""Interactive menu for the Wardbook patient record manager.

Usage:
    wardbook
    python -m wardbook

Records are loaded from ``patient_records.txt`` at start-up and written
back only when "Save Records" is chosen.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .codec import load_records, save_records, write_report
from .config import AppConfig, configure_logging
from .errors import PersistenceError
from .models import AdmissionForm, Patient
from .store import PatientStore
from .validation import (
    ValidationResult,
    validate_age,
    validate_gender,
    validate_menu_choice,
    validate_patient_id,
)

logger = logging.getLogger(__name__)

RULE = "=" * 36

MENU_ITEMS = (
    "Admit Patient",
    "Discharge Patient",
    "Search Patient by ID",
    "Search Patient by Name",
    "List All Admitted Patients",
    "List All Discharged Patients",
    "List All Patients",
    "Update Patient Record",
    "Delete Patient Record",
    "Save Records",
    "Sort Patients by Name",
    "Sort Patients by ID",
    "Generate Patient Report",
    "Exit",
)
EXIT_CHOICE = len(MENU_ITEMS)


class Console:
    """Line-oriented terminal I/O. Swap the callables to script a session."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str) -> str:
        """Read one line. Raises EOFError when input is exhausted."""
        return self._input(prompt)

    def ask_valid(self, prompt: str, validator: Callable[[str], ValidationResult]):
        """Prompt until *validator* accepts the answer, then return its value."""
        result = validator(self.ask(prompt))
        while not result.ok:
            result = validator(self.ask(result.error))
        return result.value

    def header(self, title: str) -> None:
        self.say(f"\n{RULE}\n==== {title} ====\n{RULE}")


def format_patient_details(patient: Patient) -> str:
    return "\n".join([
        f"Patient ID: {patient.id}",
        f"Name: {patient.name}",
        f"Age: {patient.age}",
        f"Gender: {patient.gender}",
        f"Address: {patient.address}",
        f"Illness: {patient.illness}",
        f"Doctor: {patient.doctor}",
        f"Admission Date: {patient.admission_date}",
        f"Discharged: {'Yes' if patient.is_discharged else 'No'}",
    ])


class WardbookCLI:
    """Menu loop bound to one store and one configuration."""

    def __init__(self, store: PatientStore, config: AppConfig, console: Console | None = None):
        self.store = store
        self.config = config
        self.console = console or Console()
        self._actions: dict[int, Callable[[], None]] = {
            1: self.admit_patient,
            2: self.discharge_patient,
            3: self.search_by_id,
            4: self.search_by_name,
            5: self.list_admitted,
            6: self.list_discharged,
            7: self.list_all,
            8: self.update_patient,
            9: self.delete_patient,
            10: self.save,
            11: self.sort_by_name,
            12: self.sort_by_id,
            13: self.generate_report,
        }

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Populate the store from the record file, if there is one."""
        if not self.config.records_path.exists():
            return
        try:
            patients = load_records(self.config.records_path)
        except PersistenceError:
            self.console.say("Error loading records!")
            return
        self.store.replace_all(patients)
        self.console.say("Patient records loaded successfully.")
        self.console.say(RULE)

    def show_menu(self) -> None:
        self.console.header("Hospital Management System")
        for number, label in enumerate(MENU_ITEMS, 1):
            self.console.say(f"{number}. {label}")

    def run(self) -> int:
        """Run the menu until Exit or end of input. Returns the exit code."""
        self.load()
        while True:
            self.show_menu()
            try:
                result = validate_menu_choice(self.console.ask("Enter your choice: "))
                if not result.ok:
                    self.console.say(result.error)
                    continue
                if result.value == EXIT_CHOICE:
                    break
                self._actions[result.value]()
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving menu")
                self.console.say()
                break
        self.console.say("Exiting program...")
        return 0

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def _ask_id(self, verb: str) -> int:
        return self.console.ask_valid(f"Enter patient ID to {verb}: ", validate_patient_id)

    def admit_patient(self) -> None:
        c = self.console
        c.header("Admit New Patient")
        form = AdmissionForm(
            name=c.ask("Enter patient name: "),
            age=c.ask_valid("Enter patient age: ", validate_age),
            gender=c.ask_valid("Enter gender (M/F): ", validate_gender),
            address=c.ask("Enter patient address: "),
            illness=c.ask("Enter illness: "),
            doctor=c.ask("Enter doctor name: "),
            admission_date=c.ask("Enter admission date (DD/MM/YYYY): "),
        )
        patient_id = self.store.admit(form)
        c.say(f"\nPatient admitted successfully with ID: {patient_id}")
        c.say(RULE)

    def discharge_patient(self) -> None:
        self.console.header("Discharge Patient")
        patient_id = self._ask_id("discharge")
        if self.store.discharge(patient_id):
            self.console.say(f"Patient with ID {patient_id} has been discharged.")
        else:
            self.console.say("Patient not found or already discharged.")
        self.console.say(RULE)

    def search_by_id(self) -> None:
        self.console.header("Search Patient by ID")
        patient = self.store.find_by_id(self._ask_id("search"))
        if patient is None:
            self.console.say("Patient not found.")
        else:
            self.console.say(format_patient_details(patient))
        self.console.say(RULE)

    def search_by_name(self) -> None:
        self.console.header("Search Patient by Name")
        matches = self.store.find_by_name(self.console.ask("Enter patient name to search: "))
        if not matches:
            self.console.say("Patient not found.")
        for patient in matches:
            self.console.say(format_patient_details(patient))
        self.console.say(RULE)

    def _list(self, title: str, heading: str, patients: list[Patient], empty: str,
              show_status: bool = False) -> None:
        self.console.header(title)
        self.console.say(f"\n{heading}:")
        for p in patients:
            line = f"ID: {p.id} | Name: {p.name}"
            if show_status:
                line += f" | Discharged: {'Yes' if p.is_discharged else 'No'}"
            self.console.say(line)
        if not patients:
            self.console.say(empty)
        self.console.say(RULE)

    def list_admitted(self) -> None:
        self._list("List of Admitted Patients", "Admitted Patients",
                   self.store.list_admitted(), "No admitted patients found.")

    def list_discharged(self) -> None:
        self._list("List of Discharged Patients", "Discharged Patients",
                   self.store.list_discharged(), "No discharged patients found.")

    def list_all(self) -> None:
        self._list("List of All Patients", "All Patients",
                   self.store.list_all(), "No patients found.", show_status=True)

    def update_patient(self) -> None:
        c = self.console
        c.header("Update Patient Record")
        patient_id = self._ask_id("update")
        patient = self.store.find_by_id(patient_id)
        if patient is None:
            c.say("Patient not found.")
            c.say(RULE)
            return
        c.say(f"\nUpdating record for {patient.name} (ID: {patient_id})")
        self.store.update(
            patient_id,
            address=c.ask("Enter new address (or press Enter to keep the same): "),
            illness=c.ask("Enter new illness (or press Enter to keep the same): "),
            doctor=c.ask("Enter new doctor (or press Enter to keep the same): "),
        )
        c.say("Patient record updated.")
        c.say(RULE)

    def delete_patient(self) -> None:
        self.console.header("Delete Patient Record")
        patient_id = self._ask_id("delete")
        patient = self.store.find_by_id(patient_id)
        if patient is not None:
            self.console.say(f"Deleting patient with ID {patient_id} ({patient.name}).")
        if self.store.delete(patient_id):
            self.console.say("Patient record deleted successfully.")
        else:
            self.console.say("Patient not found.")
        self.console.say(RULE)

    def save(self) -> None:
        try:
            save_records(self.store.list_all(), self.config.records_path)
        except PersistenceError:
            self.console.say("Error saving records!")
            return
        self.console.say("All records saved successfully.")
        self.console.say(RULE)

    def sort_by_name(self) -> None:
        self.store.sort_by_name()
        self.console.say("Patients sorted by name.")

    def sort_by_id(self) -> None:
        self.store.sort_by_id()
        self.console.say("Patients sorted by ID.")

    def generate_report(self) -> None:
        try:
            write_report(self.store.list_all(), self.config.report_path)
        except PersistenceError:
            self.console.say("Error generating report.")
            return
        self.console.say("Patient report generated successfully.")


def main() -> int:
    """Entry point for the ``wardbook`` command."""
    config = AppConfig.from_env()
    configure_logging(config)
    return WardbookCLI(PatientStore(), config).run()


if __name__ == "__main__":
    raise SystemExit(main())
