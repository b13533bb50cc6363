from app.db.database import SessionLocal
from app.db.repositories import TeamRepository

TOO_WIDE = 2**64


def test_list_by_caller_follows_membership_in_id_order(seeded):
    with SessionLocal() as db:
        repo = TeamRepository(db)
        assert [t.id for t in repo.list_by_caller(1)] == [1, 2, 3]
        assert repo.list_by_caller(999) == []


def test_find_by_id_for_caller_is_membership_scoped(seeded):
    with SessionLocal() as db:
        repo = TeamRepository(db)
        assert repo.find_by_id_for_caller(1, 2).name == "Second Team"
        assert repo.find_by_id_for_caller(1, 4) is None
        assert repo.find_by_id_for_caller(1, TOO_WIDE) is None
        assert repo.find_by_id_for_caller(1, -TOO_WIDE) is None


def test_members_in_id_order(seeded):
    with SessionLocal() as db:
        repo = TeamRepository(db)
        assert [u.id for u in repo.members(1)] == [1, 2]
        assert repo.members(999) == []
        assert repo.members(TOO_WIDE) == []


def test_current_team_selection_and_fallback(seeded):
    with SessionLocal() as db:
        repo = TeamRepository(db)
        assert repo.current_team(1).id == 2
        assert repo.current_team(3).id == 4
        assert repo.current_team(4) is None
        assert repo.current_team(999) is None
