"""PersonService — build a sample Person through the validation applicative."""

from __future__ import annotations

import logging

from optica.domain.samples import Person
from optica.domain.validation import Success
from optica.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class PersonService:
    """Validate raw person input and report every failing field."""

    def validate(self, name: str, age: int) -> ServiceResult:
        op = "validate_person"
        result = Person.try_new(name, age)
        if isinstance(result, Success):
            person = result.value
            return ServiceResult(ok=True, op=op, data={"name": person.name, "age": person.age})

        messages = result.errors.to_list()
        logger.debug("Person validation failed: %s", messages)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="VALIDATION_FAILED",
                message="; ".join(messages),
                detail={"errors": messages},
            ),
        )
