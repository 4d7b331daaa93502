import pytest

from fitbook.core.credentials import add_user, find_user, get_user_by_id
from fitbook.core.errors import UserExistsError
from fitbook.models.user import User


def test_add_user_stores_bcrypt_hash(db):
    user_id = add_user(db, "carol", "hunter22", "0800000000")
    row = db.query(User).filter(User.id == user_id).one()
    assert row.password != "hunter22"
    assert row.password.startswith("$2")
    assert row.phone == "0800000000"
    assert row.role == "user"


def test_duplicate_name_rejected(db):
    add_user(db, "carol", "hunter22")
    with pytest.raises(UserExistsError):
        add_user(db, "carol", "other")
    assert db.query(User).filter(User.name == "carol").count() == 1


def test_find_user_returns_same_id(db):
    user_id = add_user(db, "carol", "hunter22")
    user = find_user(db, "carol", "hunter22")
    assert user is not None
    assert user.id == user_id


@pytest.mark.parametrize("name,password", [("carol", "wrong"), ("nobody", "hunter22"), ("carol", "")])
def test_find_user_rejects(db, name, password):
    add_user(db, "carol", "hunter22")
    assert find_user(db, name, password) is None


def test_get_user_by_id_includes_role(db, admin_id):
    user = get_user_by_id(db, admin_id)
    assert user.name == "root"
    assert user.is_admin
    assert get_user_by_id(db, "missing") is None


def test_create_user_script(db, capsys):
    from fitbook.scripts.create_user import main

    assert main(["zoe", "pw", "--role", "admin"]) == 0
    assert main(["zoe", "pw"]) == 1
    assert "already exists" in capsys.readouterr().out
    assert find_user(db, "zoe", "pw").is_admin
