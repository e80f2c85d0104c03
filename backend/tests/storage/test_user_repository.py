import pytest

from domain.shared.exceptions import (
    EntityAlreadyExistsException,
    EntityNotFoundException,
    InvalidOperationException,
)
from domain.users.entities import Group, User
from infrastructure.persistence import models
from infrastructure.persistence.repositories import (
    DjangoStructuralElementRepository,
    DjangoUserRepository,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def saved_groups():
    groups = DjangoStructuralElementRepository(Group)
    staff = groups.save(Group(name="staff"))
    engineers = groups.save(Group(name="engineers", parent=staff))
    return staff, engineers


@pytest.fixture
def users():
    return DjangoUserRepository()


def test_save_and_load(users, saved_groups):
    _, engineers = saved_groups
    user = User(
        name="ada",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        timezone="Europe/London",
        group=engineers,
    )
    user.permissions.set_permission_value("self", 0, True)
    users.save(user)

    loaded = users.get_by_id(user.id)

    assert loaded.id_string == f"U{user.id:06d}"
    assert loaded.full_name == "Ada Lovelace"
    assert loaded.timezone == "Europe/London"
    assert loaded.group.full_path() == "staff → engineers"
    assert loaded.permissions.get_permission_value("self", 0) is True


def test_profile_preferences_use_config_columns(users):
    users.save(User(name="bob", language="de", theme="darkly"))
    row = models.User.objects.get(name="bob")
    assert (row.language, row.theme) == ("de", "darkly")
    assert models.User._meta.get_field('language').column == 'config_language'


def test_password_hash_is_stored(users):
    user = users.save(User(name="bob").set_password("md5$x$y"))
    assert models.User.objects.get(pk=user.id).password == "md5$x$y"
    assert users.get_by_name("bob").get_password() == "md5$x$y"


def test_user_without_password(users):
    users.save(User(name="bob"))
    assert users.get_by_name("bob").password == ""


def test_duplicate_name_raises(users):
    users.save(User(name="bob"))
    with pytest.raises(EntityAlreadyExistsException):
        users.save(User(name="bob"))


def test_update_does_not_count_as_duplicate(users):
    user = users.save(User(name="bob"))
    user.update_profile(department="Lab")
    users.save(user)
    assert models.User.objects.get(pk=user.id).department == "Lab"


def test_unsaved_group_raises(users):
    with pytest.raises(InvalidOperationException):
        users.save(User(name="bob", group=Group(name="unsaved")))


def test_get_by_id_missing_raises(users):
    with pytest.raises(EntityNotFoundException):
        users.get_by_id(4711)


def test_get_by_name_missing(users):
    assert users.get_by_name("nobody") is None


def test_list_all(users, saved_groups, as_names):
    staff, _ = saved_groups
    users.save(User(name="carol", group=staff))
    users.save(User(name="alice"))

    all_users = users.list_all()

    assert as_names(all_users) == ["alice", "carol"]
    assert all_users[1].group.name == "staff"


def test_exists(users):
    users.save(User(name="bob"))
    assert users.exists("bob")
    assert not users.exists("alice")


def test_deleting_group_keeps_users(users, saved_groups):
    _, engineers = saved_groups
    user = users.save(User(name="bob", group=engineers))

    DjangoStructuralElementRepository(Group).delete(engineers)

    assert users.get_by_id(user.id).group is None


def test_password_is_not_kept_in_history(users):
    user = users.save(User(name="bob").set_password("md5$x$y"))
    record = models.User.objects.get(pk=user.id).history.first()
    assert not hasattr(record, 'password')


def test_rows_written_by_the_manager_can_be_loaded(users):
    models.User.objects.create_superuser('root', 'secret12', email='root@localhost')

    root = users.get_by_name('root')

    assert root.email == 'root@localhost'
    assert root.get_password().startswith('md5$')
    assert root.permissions.get_permission_value('users', 4) is True
    assert [user.name for user in users.list_all()] == ['root']


def test_stored_values_are_not_validated_again_on_load(users):
    row = models.User.objects.create_user('legacy', timezone='Nowhere/Atlantis', email='legacy')

    legacy = users.get_by_id(row.id)

    assert legacy.timezone == 'Nowhere/Atlantis'
    assert legacy.email == 'legacy'
