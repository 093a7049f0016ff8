"""Exceptions raised by the core services and caught by the UI controllers."""

from __future__ import annotations


class InvoiceProError(Exception):
    """Base class for all application errors."""


class ValidationError(InvoiceProError, ValueError):
    """A required field is missing; `rule` names the check that failed."""

    def __init__(self, rule: str, message: str):
        super().__init__(message)
        self.rule = rule
        self.message = message


class InvoiceValidationError(ValidationError):
    pass


class ClientValidationError(ValidationError):
    pass


class EntityNotFoundError(InvoiceProError, KeyError):
    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} '{entity_id}' not found")
        self.kind = kind
        self.entity_id = entity_id

    def __str__(self) -> str:
        return str(self.args[0])


class ClientNotFoundError(EntityNotFoundError):
    """Invoice refers to a client that no longer exists."""

    def __init__(self, client_id: str):
        super().__init__("Client", client_id)


class BackupImportError(InvoiceProError, ValueError):
    pass
