"""Provisioning policy and strategy selection."""

import pytest

from garage_api.application.services.login_id_uniqueness import (
    ConstraintUniqueness,
    PreCheckUniqueness,
    get_uniqueness_strategy,
)
from garage_api.application.services.provisioning_policy import (
    AllowAllPolicy,
    SameGaragePolicy,
    get_provisioning_policy,
)
from garage_api.domain.models.user import User

from tests.helpers import PARENT_UID, valid_employee

URL = "/api/employees"
COWORKER_UID = "22222222-2222-2222-2222-222222222222"
OUTSIDER_UID = "33333333-3333-3333-3333-333333333333"


@pytest.fixture
def same_garage(settings, parent, make_user):
    settings.set("PROVISIONING_POLICY", "same_garage")
    make_user(user_uid=COWORKER_UID, login_id="co.worker@testgarage", user_role="manager")
    make_user(
        user_uid=OUTSIDER_UID,
        login_id="out.sider@othergarage",
        garage_uid="garage-uid-456",
        garage_id="GARAGE002",
        garage_name="Other Garage",
    )


def test_caller_from_the_same_garage_may_provision(client, same_garage):
    response = client.post(URL, json=valid_employee(), headers={"X-User-Uid": COWORKER_UID})
    assert response.status_code == 201


def test_parent_may_provision_for_itself(client, same_garage):
    response = client.post(URL, json=valid_employee(), headers={"X-User-Uid": PARENT_UID})
    assert response.status_code == 201


@pytest.mark.parametrize("headers", [{}, {"X-User-Uid": OUTSIDER_UID}, {"X-User-Uid": "unknown"}])
def test_other_callers_are_forbidden(client, same_garage, count_rows, headers):
    response = client.post(URL, json=valid_employee(), headers=headers)

    assert response.status_code == 403
    assert response.json() == {"success": False, "error": "Not authorized to add employees for this garage"}
    assert count_rows(User) == 3


def test_inactive_caller_is_forbidden(client, same_garage, make_user):
    make_user(user_uid="44444444-4444-4444-4444-444444444444", login_id="gone@testgarage", is_active=False)
    response = client.post(
        URL,
        json=valid_employee(),
        headers={"X-User-Uid": "44444444-4444-4444-4444-444444444444"},
    )
    assert response.status_code == 403


def test_missing_parent_is_reported_before_authorization(client, same_garage):
    response = client.post(URL, json=valid_employee(parentUserUid="missing"))
    assert response.status_code == 404


def test_allow_all_ignores_the_caller(parent):
    assert AllowAllPolicy().can_provision_under(None, parent)


def test_same_garage_policy_compares_garage_identity(user_repo, parent, make_user):
    policy = SameGaragePolicy(user_repo)
    make_user(user_uid=COWORKER_UID, login_id="co.worker@testgarage", garage_id="GARAGE009")

    assert policy.can_provision_under(PARENT_UID, parent)
    assert not policy.can_provision_under(COWORKER_UID, parent)
    assert not policy.can_provision_under(None, parent)


def test_policy_lookup(user_repo):
    assert isinstance(get_provisioning_policy("allow_all", user_repo), AllowAllPolicy)
    assert isinstance(get_provisioning_policy("SAME_GARAGE", user_repo), SameGaragePolicy)
    with pytest.raises(ValueError):
        get_provisioning_policy("owners_only", user_repo)


def test_uniqueness_lookup():
    assert isinstance(get_uniqueness_strategy("precheck"), PreCheckUniqueness)
    assert isinstance(get_uniqueness_strategy("Constraint"), ConstraintUniqueness)
    with pytest.raises(ValueError):
        get_uniqueness_strategy("optimistic")
