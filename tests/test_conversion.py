"""
Lead -> opportunity conversion workflow.
"""
import uuid
from datetime import date, timedelta

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.core.exceptions import ForbiddenError, NotFoundError
from leadflow.models.lead import Lead
from leadflow.models.opportunity import Opportunity
from leadflow.schemas.lead import LeadConvertRequest, LeadCreate
from leadflow.services.conversion_service import ConversionService
from leadflow.services.lead_service import LeadService


@pytest.fixture
def conversion_service(session) -> ConversionService:
    return ConversionService(session)


@pytest.fixture
def lead_service(session) -> LeadService:
    return LeadService(session)


async def test_convert_qualifies_lead_and_links_opportunity(conversion_service, lead_service, rep):
    lead = await lead_service.create(rep, LeadCreate(name="Acme", company="Acme Co"))

    opportunity = await conversion_service.convert_lead(rep, lead.id, LeadConvertRequest(value=50000))

    assert (await lead_service.get(rep, lead.id)).status == "qualified"
    assert opportunity.lead_id == lead.id
    assert opportunity.assigned_to == rep.id
    assert opportunity.company == "Acme Co"
    assert opportunity.value == 50000
    assert (opportunity.stage, opportunity.probability) == ("discovery", 25)
    assert abs((opportunity.expected_close_date - (date.today() + timedelta(days=30))).days) <= 1


async def test_convert_defaults_name_from_company(conversion_service, lead_service, rep):
    lead = await lead_service.create(rep, LeadCreate(name="Wile E.", company="Acme Co"))
    opportunity = await conversion_service.convert_lead(rep, lead.id, LeadConvertRequest())

    assert opportunity.name == "Acme Co - Sales Opportunity"
    assert opportunity.value == 0


async def test_convert_defaults_name_from_lead_without_company(conversion_service, lead_service, rep):
    lead = await lead_service.create(rep, LeadCreate(name="Solo Trader"))
    opportunity = await conversion_service.convert_lead(rep, lead.id, LeadConvertRequest())
    assert opportunity.name == "Solo Trader - Sales Opportunity"


async def test_convert_applies_overrides(conversion_service, lead_service, rep):
    lead = await lead_service.create(rep, LeadCreate(name="Acme"))
    opportunity = await conversion_service.convert_lead(rep, lead.id, LeadConvertRequest(
        opportunity_name="Acme Renewal", value=1200, expected_close_date=date(2031, 6, 30)
    ))

    assert opportunity.name == "Acme Renewal"
    assert opportunity.value == 1200
    assert opportunity.expected_close_date == date(2031, 6, 30)


async def test_convert_is_not_idempotent(conversion_service, lead_service, rep):
    lead = await lead_service.create(rep, LeadCreate(name="Acme"))

    first = await conversion_service.convert_lead(rep, lead.id, LeadConvertRequest())

    assert (await lead_service.get(rep, lead.id)).status == "qualified"
    second = await conversion_service.convert_lead(rep, lead.id, LeadConvertRequest())
    assert (await lead_service.get(rep, lead.id)).status == "qualified"

    assert first.id != second.id
    assert first.lead_id == second.lead_id == lead.id


async def test_other_rep_cannot_convert(conversion_service, lead_service, rep, other_rep):
    lead = await lead_service.create(rep, LeadCreate(name="Acme"))

    with pytest.raises(ForbiddenError):
        await conversion_service.convert_lead(other_rep, lead.id, LeadConvertRequest())
    assert (await lead_service.get(rep, lead.id)).status == "new"


async def test_manager_cannot_convert(conversion_service, lead_service, rep, manager):
    lead = await lead_service.create(rep, LeadCreate(name="Acme"))
    with pytest.raises(ForbiddenError):
        await conversion_service.convert_lead(manager, lead.id, LeadConvertRequest())


async def test_convert_unknown_lead(conversion_service, rep):
    with pytest.raises(NotFoundError):
        await conversion_service.convert_lead(rep, uuid.uuid4(), LeadConvertRequest())


async def test_failed_opportunity_insert_rolls_back_lead(
    conversion_service, lead_service, rep, engine, monkeypatch
):
    lead = await lead_service.create(rep, LeadCreate(name="Acme"))
    lead_id = lead.id

    async def broken_create(obj_in, commit=True):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(conversion_service.opportunity_repo, "create", broken_create)

    with pytest.raises(SQLAlchemyError):
        await conversion_service.convert_lead(rep, lead_id, LeadConvertRequest())

    async with AsyncSession(engine) as fresh:
        stored = await fresh.get(Lead, lead_id)
        assert stored.status == "new"
        assert (await fresh.exec(select(Opportunity))).all() == []


def test_convert_endpoint(client, register):
    headers = register("rep@example.com")
    lead_id = client.post("/api/leads", headers=headers, json={
        "name": "Acme", "company": "Acme Co"
    }).json()["id"]

    r = client.post(f"/api/leads/{lead_id}/convert", headers=headers, json={"value": 50000})
    assert r.status_code == 201
    opportunity = r.json()
    assert opportunity["leadId"] == lead_id
    assert opportunity["name"] == "Acme Co - Sales Opportunity"
    assert (opportunity["stage"], opportunity["probability"], opportunity["value"]) == (
        "discovery", 25, 50000
    )

    r = client.get(f"/api/leads/{lead_id}", headers=headers)
    assert r.json()["status"] == "qualified"


def test_convert_endpoint_without_body(client, register):
    headers = register("rep@example.com")
    lead_id = client.post("/api/leads", headers=headers, json={"name": "Acme"}).json()["id"]

    r = client.post(f"/api/leads/{lead_id}/convert", headers=headers)
    assert r.status_code == 201
    assert r.json()["name"] == "Acme - Sales Opportunity"


def test_convert_unknown_lead_is_404(client, register):
    headers = register("rep@example.com")
    r = client.post(f"/api/leads/{uuid.uuid4()}/convert", headers=headers, json={})
    assert r.status_code == 404


def test_convert_endpoint_treats_blank_fields_as_missing(client, register):
    headers = register("rep@example.com")
    lead_id = client.post("/api/leads", headers=headers, json={
        "name": "Acme", "company": "Acme Co"
    }).json()["id"]

    r = client.post(f"/api/leads/{lead_id}/convert", headers=headers, json={
        "opportunityName": "", "value": 0, "expectedCloseDate": ""
    })

    assert r.status_code == 201
    opportunity = r.json()
    assert opportunity["name"] == "Acme Co - Sales Opportunity"
    close_date = date.fromisoformat(opportunity["expectedCloseDate"])
    assert abs((close_date - (date.today() + timedelta(days=30))).days) <= 1


def test_convert_endpoint_rejects_malformed_close_date(client, register):
    headers = register("rep@example.com")
    lead_id = client.post("/api/leads", headers=headers, json={"name": "Acme"}).json()["id"]

    r = client.post(f"/api/leads/{lead_id}/convert", headers=headers, json={"expectedCloseDate": "soon"})
    assert r.status_code == 400
