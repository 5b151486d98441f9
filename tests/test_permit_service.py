import pytest
from fastapi import HTTPException

from roadrunners.schemas import PermitCreate, PermitStatusEnum, PermitUpdate
from roadrunners.services.permit_service import PermitService, generate_permit_id

from conftest import FailingKVStore


def _create(**overrides):
    data = {
        "fullName": "A Rider",
        "email": "a@x.com",
        "idNumber": "ID1",
        "dlNumber": "DL1",
        "documentPath": "permits/doc1.pdf",
    }
    data.update(overrides)
    return PermitCreate.model_validate(data)


def test_generate_permit_id_shape():
    first, second = generate_permit_id(), generate_permit_id()
    assert first != second
    millis, suffix = first.split("-")
    assert millis.isdigit()
    assert len(suffix) == 9


@pytest.mark.asyncio
async def test_submit_permit_persists_pending_record(store, storage):
    service = PermitService(store, storage)
    record = await service.submit_permit(_create(destination="Ladakh"))

    assert record["status"] == "PENDING"
    assert record["submittedAt"]
    assert "updatedAt" not in record
    assert record["idType"] == "AADHAAR"
    assert store.data[f"permit:{record['id']}"] == record


@pytest.mark.asyncio
async def test_submit_permit_lists_every_missing_field(store, storage):
    service = PermitService(store, storage)
    with pytest.raises(HTTPException) as exc:
        await service.submit_permit(_create(fullName="  ", idNumber=None, documentPath=""))

    assert exc.value.status_code == 400
    assert exc.value.detail == "Missing required fields: fullName, idNumber, documentPath"
    assert store.data == {}


@pytest.mark.asyncio
async def test_submit_permit_store_failure_is_generic_500(storage):
    service = PermitService(FailingKVStore(), storage)
    with pytest.raises(HTTPException) as exc:
        await service.submit_permit(_create())
    assert exc.value.status_code == 500
    assert exc.value.detail == "Failed to submit permit"


@pytest.mark.asyncio
async def test_update_permit_merges_and_stamps_updated_at(store, storage):
    service = PermitService(store, storage)
    created = await service.submit_permit(_create())

    updated = await service.update_permit(created["id"], PermitUpdate(status="approved", admin_notes="Looks good"))

    assert updated["status"] == "APPROVED"
    assert updated["adminNotes"] == "Looks good"
    assert updated["updatedAt"]
    assert updated["submittedAt"] == created["submittedAt"]
    assert updated["idNumber"] == "ID1"


@pytest.mark.asyncio
async def test_update_permit_notes_only_keeps_status(store, storage):
    service = PermitService(store, storage)
    created = await service.submit_permit(_create())

    updated = await service.update_permit(created["id"], PermitUpdate(admin_notes="Call rider"))
    assert updated["status"] == "PENDING"
    assert updated["adminNotes"] == "Call rider"


@pytest.mark.asyncio
async def test_update_missing_permit_is_404(store, storage):
    service = PermitService(store, storage)
    with pytest.raises(HTTPException) as exc:
        await service.update_permit("nope", PermitUpdate(status=PermitStatusEnum.approved))
    assert exc.value.status_code == 404
    assert exc.value.detail == "Permit not found"


@pytest.mark.asyncio
async def test_any_transition_allowed_by_default(store, storage):
    service = PermitService(store, storage, strict_transitions=False)
    created = await service.submit_permit(_create())

    rejected = await service.update_permit(created["id"], PermitUpdate(status="REJECTED"))
    reopened = await service.update_permit(created["id"], PermitUpdate(status="PENDING"))
    assert rejected["status"] == "REJECTED"
    assert reopened["status"] == "PENDING"


@pytest.mark.asyncio
async def test_strict_transitions_reject_skipping_verification(store, storage):
    service = PermitService(store, storage, strict_transitions=True)
    created = await service.submit_permit(_create())

    with pytest.raises(HTTPException) as exc:
        await service.update_permit(created["id"], PermitUpdate(status="APPROVED"))
    assert exc.value.status_code == 409

    await service.update_permit(created["id"], PermitUpdate(status="VERIFIED"))
    approved = await service.update_permit(created["id"], PermitUpdate(status="APPROVED"))
    assert approved["status"] == "APPROVED"

    with pytest.raises(HTTPException):
        await service.update_permit(created["id"], PermitUpdate(status="PENDING"))


@pytest.mark.asyncio
async def test_lookup_by_email_projects_public_fields_only(store, storage):
    service = PermitService(store, storage)
    await service.submit_permit(_create(email="Rider@X.com", destination="Spiti"))
    await service.submit_permit(_create(email="someone@else.com"))

    results = await service.lookup_by_email("rider@x.com")

    assert len(results) == 1
    assert set(results[0]) == {"id", "destination", "status", "submittedAt", "updatedAt"}
    assert results[0]["destination"] == "Spiti"
    assert results[0]["updatedAt"] is None


@pytest.mark.asyncio
async def test_lookup_by_email_requires_email(store, storage):
    service = PermitService(store, storage)
    with pytest.raises(HTTPException) as exc:
        await service.lookup_by_email("   ")
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_list_permits_newest_first(store, storage):
    service = PermitService(store, storage)
    await store.set("permit:old", {"id": "old", "submittedAt": "2026-01-01T00:00:00Z"})
    await store.set("permit:new", {"id": "new", "submittedAt": "2026-05-01T00:00:00Z"})

    permits = await service.list_permits()
    assert [p["id"] for p in permits] == ["new", "old"]


@pytest.mark.asyncio
async def test_document_url_requires_attached_document(store, storage):
    service = PermitService(store, storage)
    await store.set("permit:p1", {
        "id": "p1", "fullName": "A", "email": "a@x.com", "idNumber": "I", "dlNumber": "D",
        "status": "PENDING", "submittedAt": "2026-01-01T00:00:00Z",
    })

    with pytest.raises(HTTPException) as exc:
        await service.get_document_url("p1")
    assert exc.value.status_code == 404
    assert exc.value.detail == "No document attached to this permit"


@pytest.mark.asyncio
async def test_document_url_is_signed(store, storage, supabase_client):
    service = PermitService(store, storage)
    created = await service.submit_permit(_create())

    link = await service.get_document_url(created["id"])

    assert link == {"url": "https://storage.example/signed/doc?token=abc", "path": "permits/doc1.pdf"}
    supabase_client.storage.from_.return_value.create_signed_url.assert_called_once_with("permits/doc1.pdf", 3600)
