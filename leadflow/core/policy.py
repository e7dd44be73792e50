"""
Authorization policy for pipeline records.

A pure decision over (principal, operation, record). Ownership is the
record's ``assigned_to``; managers get read-only visibility over everything.

    role     list/read   create   update/delete own   update/delete other's
    rep      own only    yes      yes                 no
    manager  all         no       no                  no
    admin    all         yes      yes                 yes
"""
import logging
import uuid
from enum import Enum
from typing import Optional, Protocol, assert_never

from leadflow.core.exceptions import ForbiddenError
from leadflow.models.enums import Role
from leadflow.schemas.auth import Principal

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class OwnedRecord(Protocol):
    assigned_to: uuid.UUID


def can_access(
    principal: Principal,
    operation: Operation,
    record: Optional[OwnedRecord] = None
) -> bool:
    """Decide whether the principal may perform the operation on the record."""
    role = principal.role
    match role:
        case Role.REP:
            if operation in (Operation.LIST, Operation.CREATE):
                return True
            # read/update/delete need a record the rep owns
            return record is not None and record.assigned_to == principal.id
        case Role.MANAGER:
            return operation in (Operation.LIST, Operation.READ)
        case Role.ADMIN:
            return True
        case _:
            assert_never(role)


def authorize(
    principal: Principal,
    operation: Operation,
    record: Optional[OwnedRecord] = None,
    resource: str = "record"
) -> None:
    """Raise ForbiddenError unless can_access() allows the operation."""
    if not can_access(principal, operation, record):
        logger.warning(
            "Denied %s on %s for user %s (role=%s)",
            operation.value, resource, principal.id, principal.role.value
        )
        raise ForbiddenError("Access denied")


def list_scope(principal: Principal) -> Optional[uuid.UUID]:
    """
    Owner filter for list queries.

    Returns the principal's id when the role only sees its own records,
    or None when the role sees everything.
    """
    authorize(principal, Operation.LIST)
    match principal.role:
        case Role.REP:
            return principal.id
        case Role.MANAGER | Role.ADMIN:
            return None
        case _:
            assert_never(principal.role)
