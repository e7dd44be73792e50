from leadflow.models.enums import Role
from leadflow.services.auth_service import AuthService
from leadflow.services.dashboard_service import DashboardService
from leadflow.services.seed_service import DEMO_PASSWORD, seed_demo_data


async def test_seed_populates_empty_database(session):
    assert await seed_demo_data(session)

    auth_service = AuthService(session)
    rep = auth_service.verify_token((await auth_service.login("rep@example.com", DEMO_PASSWORD))["token"])
    manager = auth_service.verify_token(
        (await auth_service.login("manager@example.com", DEMO_PASSWORD))["token"]
    )
    assert (rep.role, manager.role) == (Role.REP, Role.MANAGER)

    stats = await DashboardService(session).compute_stats(rep)
    assert stats.leads_by_status == {"new": 1, "contacted": 1}
    assert stats.opportunities_by_stage == {"proposal": 1}
    assert stats.total_opportunity_value == 50000


async def test_seed_runs_once(session):
    assert await seed_demo_data(session)
    assert not await seed_demo_data(session)


async def test_seed_skips_populated_database(session, rep):
    assert not await seed_demo_data(session)
