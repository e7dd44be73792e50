"""
Authorization policy: role x operation x ownership.
"""
import uuid
from types import SimpleNamespace

import pytest

from leadflow.core.exceptions import ForbiddenError
from leadflow.core.policy import Operation, authorize, can_access, list_scope
from leadflow.models.enums import Role
from leadflow.schemas.auth import Principal


def _principal(role: Role) -> Principal:
    return Principal(id=uuid.uuid4(), email=f"{role.value}@example.com", name=role.value, role=role)


def _record(owner_id: uuid.UUID):
    return SimpleNamespace(assigned_to=owner_id)


@pytest.mark.parametrize("operation", [Operation.READ, Operation.UPDATE, Operation.DELETE])
def test_rep_can_touch_own_record(operation):
    rep = _principal(Role.REP)
    assert can_access(rep, operation, _record(rep.id))


@pytest.mark.parametrize("operation", [Operation.READ, Operation.UPDATE, Operation.DELETE])
def test_rep_cannot_touch_other_record(operation):
    rep = _principal(Role.REP)
    assert not can_access(rep, operation, _record(uuid.uuid4()))


def test_rep_needs_a_record_for_record_operations():
    rep = _principal(Role.REP)
    assert not can_access(rep, Operation.UPDATE)


def test_rep_can_list_and_create():
    rep = _principal(Role.REP)
    assert can_access(rep, Operation.LIST)
    assert can_access(rep, Operation.CREATE)


def test_manager_is_read_only():
    manager = _principal(Role.MANAGER)
    someone_elses = _record(uuid.uuid4())
    own = _record(manager.id)

    assert can_access(manager, Operation.LIST)
    assert can_access(manager, Operation.READ, someone_elses)
    assert not can_access(manager, Operation.CREATE)
    for operation in (Operation.UPDATE, Operation.DELETE):
        assert not can_access(manager, operation, someone_elses)
        assert not can_access(manager, operation, own)


@pytest.mark.parametrize("operation", list(Operation))
def test_admin_can_do_everything(operation):
    admin = _principal(Role.ADMIN)
    assert can_access(admin, operation, _record(uuid.uuid4()))


def test_authorize_raises_forbidden():
    manager = _principal(Role.MANAGER)
    with pytest.raises(ForbiddenError) as exc:
        authorize(manager, Operation.CREATE)
    assert exc.value.status_code == 403


def test_list_scope_by_role():
    rep = _principal(Role.REP)
    assert list_scope(rep) == rep.id
    assert list_scope(_principal(Role.MANAGER)) is None
    assert list_scope(_principal(Role.ADMIN)) is None
