"""Use cases to register, edit, list and remove people."""

from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.domain.errors import NotFoundError, ValidationFailureError
from household_ledger.domain.models import (
    FailureReason,
    Person,
    PersonDeletionSummary,
    PersonOverview,
    ValidationIssue,
)
from household_ledger.domain.policies.naming import normalize_label
from household_ledger.domain.services.deletion import summarize_person_deletion
from household_ledger.domain.services.validation import validate_person_fields
from household_ledger.infrastructure.logging.logger import get_app_logger

PERSON_ENTITY = "Pessoa"


class _PeopleUseCase:
    """Shared wiring for people use cases."""

    def __init__(self, repository: HouseholdRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing household records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def _require_person(self, person_id: int) -> Person:
        person = self._repository.find_person_by_id(person_id)
        if person is None:
            self._logger.warning(f"Person {person_id} not found")
            raise NotFoundError(PERSON_ENTITY, person_id)
        return person


class ListPeopleUseCase(_PeopleUseCase):
    """List every person with its transaction count."""

    def execute(self) -> list[PersonOverview]:
        people = self._repository.list_people()
        counts = self._repository.count_transactions_by_person()
        self._logger.info(f"Listed {len(people)} people")
        return [
            PersonOverview(
                person=person,
                transaction_count=counts.get(person.id, 0),
            )
            for person in people
        ]


class GetPersonUseCase(_PeopleUseCase):
    """Fetch a single person."""

    def execute(self, person_id: int) -> PersonOverview:
        person = self._require_person(person_id)
        return PersonOverview(
            person=person,
            transaction_count=self._repository.count_transactions_for_person(
                person_id
            ),
        )


class CreatePersonUseCase(_PeopleUseCase):
    """Register a new person after checking its fields and name."""

    def execute(self, name: str, age: int) -> Person:
        """Create the person.

        Args:
            name: Display name; trimmed before storage.
            age: Age in years.

        Returns:
            Person: The stored person with its id.

        Raises:
            ValidationFailureError: If a field is invalid or the name is
                already taken.
        """
        issues = validate_person_fields(name, age)
        cleaned = normalize_label(name)
        if not issues and self._repository.name_exists(cleaned):
            issues.append(
                ValidationIssue(
                    FailureReason.DUPLICATE_NAME,
                    f"Já existe uma pessoa cadastrada com o nome '{cleaned}'.",
                )
            )
        if issues:
            self._logger.warning(
                f"Rejected person creation: {[i.message for i in issues]}"
            )
            raise ValidationFailureError(issues)
        person = self._repository.add_person(cleaned, age)
        self._logger.info(f"Created person id={person.id}")
        return person


class UpdatePersonUseCase(_PeopleUseCase):
    """Edit a person's name and age."""

    def execute(self, person_id: int, name: str, age: int) -> PersonOverview:
        """Update the person.

        Raises:
            NotFoundError: If the person does not exist.
            ValidationFailureError: If a field is invalid or another person
                already uses the name.
        """
        self._require_person(person_id)
        issues = validate_person_fields(name, age)
        cleaned = normalize_label(name)
        if not issues and self._repository.name_exists(
            cleaned,
            excluding_person_id=person_id,
        ):
            issues.append(
                ValidationIssue(
                    FailureReason.DUPLICATE_NAME,
                    f"Já existe outra pessoa cadastrada com o nome "
                    f"'{cleaned}'.",
                )
            )
        if issues:
            self._logger.warning(
                f"Rejected update of person id={person_id}: "
                f"{[i.message for i in issues]}"
            )
            raise ValidationFailureError(issues)
        person = self._repository.update_person(person_id, cleaned, age)
        self._logger.info(f"Updated person id={person_id}")
        return PersonOverview(
            person=person,
            transaction_count=self._repository.count_transactions_for_person(
                person_id
            ),
        )


class DeletePersonUseCase(_PeopleUseCase):
    """Remove a person and, by cascade, all of its transactions."""

    def execute(self, person_id: int) -> PersonDeletionSummary:
        """Delete the person.

        The number of transactions is read before the delete so the summary
        can report how many were removed with it.

        Raises:
            NotFoundError: If the person does not exist.
        """
        person = self._require_person(person_id)
        count = self._repository.count_transactions_for_person(person_id)
        self._repository.delete_person(person_id)
        self._logger.info(
            f"Deleted person id={person_id} with {count} transactions"
        )
        return summarize_person_deletion(person, count)


__all__ = [
    "ListPeopleUseCase",
    "GetPersonUseCase",
    "CreatePersonUseCase",
    "UpdatePersonUseCase",
    "DeletePersonUseCase",
]
