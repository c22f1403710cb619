"""Unit tests for the RatingService and its store aggregate bookkeeping."""

import pytest

from app.application.services import RatingService
from app.domain.entities import AuditAction, AuditEntity, Role
from app.domain.exceptions import DomainValidationError, EntityNotFoundError, ForbiddenError


@pytest.fixture
def service(uow) -> RatingService:
    return RatingService(uow)


@pytest.mark.asyncio
async def test_first_rating_sets_aggregate_to_score(service, uow, seed):
    rater = await seed.user("Alice")
    store = await seed.store("Corner Shop")

    rating = await service.submit_rating(store.id, rater.id, 5, "Great")

    assert rating.id is not None
    assert rating.rater.email == "alice@example.com"
    stored = uow.db.stores[store.id]
    assert stored.avg_rating == 5.0
    assert stored.rating_count == 1


@pytest.mark.asyncio
async def test_updating_a_rating_keeps_count_and_shifts_average(service, uow, seed):
    alice = await seed.user("Alice")
    bob = await seed.user("Bob")
    store = await seed.store("Bakery")
    await service.submit_rating(store.id, alice.id, 3)
    await service.submit_rating(store.id, bob.id, 5)
    assert uow.db.stores[store.id].avg_rating == pytest.approx(4.0)

    await service.submit_rating(store.id, alice.id, 5)

    stored = uow.db.stores[store.id]
    assert stored.avg_rating == pytest.approx(5.0)
    assert stored.rating_count == 2


@pytest.mark.asyncio
async def test_new_rater_folds_into_existing_aggregate(service, uow, seed):
    alice = await seed.user("Alice")
    bob = await seed.user("Bob")
    carol = await seed.user("Carol")
    store = await seed.store("Bakery")
    await service.submit_rating(store.id, alice.id, 5)
    await service.submit_rating(store.id, bob.id, 5)

    await service.submit_rating(store.id, carol.id, 1)

    stored = uow.db.stores[store.id]
    assert stored.avg_rating == pytest.approx(11 / 3)
    assert stored.rating_count == 3


@pytest.mark.asyncio
async def test_aggregate_matches_live_ratings_after_mixed_submissions(service, uow, seed):
    raters = [await seed.user(f"Rater{i}") for i in range(4)]
    store = await seed.store("Market")
    submissions = [(0, 4), (1, 2), (0, 1), (2, 5), (3, 3), (1, 5), (2, 2)]

    for index, score in submissions:
        await service.submit_rating(store.id, raters[index].id, score)

    mean, count = seed.live_aggregate(store.id)
    stored = uow.db.stores[store.id]
    assert stored.rating_count == count == 4
    assert stored.avg_rating == pytest.approx(mean)


@pytest.mark.asyncio
async def test_resubmission_updates_the_same_row(service, uow, seed):
    rater = await seed.user("Alice")
    store = await seed.store("Bakery")

    first = await service.submit_rating(store.id, rater.id, 2, "meh")
    second = await service.submit_rating(store.id, rater.id, 4, "better now")

    assert second.id == first.id
    assert len(uow.db.ratings) == 1
    assert uow.db.ratings[first.id].comment == "better now"
    assert uow.db.stores[store.id].rating_count == 1


@pytest.mark.asyncio
async def test_same_score_resubmission_leaves_aggregate_unchanged(service, uow, seed):
    alice = await seed.user("Alice")
    bob = await seed.user("Bob")
    store = await seed.store("Bakery")
    await service.submit_rating(store.id, alice.id, 2)
    await service.submit_rating(store.id, bob.id, 5)

    await service.submit_rating(store.id, alice.id, 2)

    stored = uow.db.stores[store.id]
    assert stored.avg_rating == pytest.approx(3.5)
    assert stored.rating_count == 2


@pytest.mark.asyncio
async def test_audit_entries_record_create_then_update(service, uow, seed):
    rater = await seed.user("Alice")
    store = await seed.store("Bakery")

    rating = await service.submit_rating(store.id, rater.id, 3)
    await service.submit_rating(store.id, rater.id, 4, "revised")

    entries = await uow.audit_logs.list_for_entity(AuditEntity.RATING, rating.id)
    assert [e.action for e in entries] == [AuditAction.CREATE, AuditAction.UPDATE]
    assert entries[0].details["old_score"] is None
    assert entries[1].details == {
        "store_id": store.id,
        "score": 4,
        "comment": "revised",
        "old_score": 3,
    }
    assert all(e.user_id == rater.id for e in entries)


@pytest.mark.asyncio
async def test_owner_cannot_rate_own_store(service, uow, seed):
    owner = await seed.user("Olivia", role=Role.STORE_OWNER)
    store = await seed.store("Own Shop", owner_id=owner.id)

    with pytest.raises(ForbiddenError):
        await service.submit_rating(store.id, owner.id, 5)

    assert uow.db.ratings == {}
    assert uow.db.audit_logs == []
    assert uow.db.stores[store.id].rating_count == 0
    assert uow.rollbacks == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("score", [0, 6, -1, True, 3.5, "4"])
async def test_invalid_scores_are_rejected(service, uow, seed, score):
    rater = await seed.user("Alice")
    store = await seed.store("Bakery")

    with pytest.raises(DomainValidationError):
        await service.submit_rating(store.id, rater.id, score)

    assert uow.db.ratings == {}
    assert uow.db.stores[store.id].rating_count == 0


@pytest.mark.asyncio
async def test_invalid_score_wins_over_missing_store(service, seed):
    rater = await seed.user("Alice")

    with pytest.raises(DomainValidationError):
        await service.submit_rating(999, rater.id, 9)


@pytest.mark.asyncio
async def test_rating_unknown_store_raises_not_found(service, seed):
    rater = await seed.user("Alice")

    with pytest.raises(EntityNotFoundError):
        await service.submit_rating(999, rater.id, 3)


@pytest.mark.asyncio
async def test_owner_reads_ratings_of_own_store(service, seed):
    owner = await seed.user("Olivia", role=Role.STORE_OWNER)
    alice = await seed.user("Alice")
    bob = await seed.user("Bob")
    store = await seed.store("Bakery", owner_id=owner.id)
    await service.submit_rating(store.id, alice.id, 2)
    await service.submit_rating(store.id, bob.id, 4)

    result = await service.get_ratings_for_store(store.id, seed.principal(owner))

    assert result.store.id == store.id
    assert [r.user_id for r in result.ratings] == [bob.id, alice.id]


@pytest.mark.asyncio
async def test_owner_cannot_read_someone_elses_store(service, seed):
    owner = await seed.user("Olivia", role=Role.STORE_OWNER)
    other = await seed.user("Oscar", role=Role.STORE_OWNER)
    store = await seed.store("Bakery", owner_id=other.id)

    with pytest.raises(ForbiddenError):
        await service.get_ratings_for_store(store.id, seed.principal(owner))
    with pytest.raises(ForbiddenError):
        await service.get_store_summary(store.id, seed.principal(owner))


@pytest.mark.asyncio
async def test_admin_reads_summary_of_any_store(service, seed):
    admin = await seed.user("Ada", role=Role.ADMIN)
    alice = await seed.user("Alice")
    store = await seed.store("Bakery")
    await service.submit_rating(store.id, alice.id, 4)

    summary = await service.get_store_summary(store.id, seed.principal(admin))

    assert summary.avg_rating == 4.0
    assert summary.rating_count == 1


@pytest.mark.asyncio
async def test_get_my_rating(service, seed):
    alice = await seed.user("Alice")
    store = await seed.store("Bakery")

    assert await service.get_my_rating(store.id, alice.id) is None
    await service.submit_rating(store.id, alice.id, 3, "ok")

    mine = await service.get_my_rating(store.id, alice.id)
    assert mine.score == 3
    assert mine.comment == "ok"

    with pytest.raises(EntityNotFoundError):
        await service.get_my_rating(999, alice.id)
