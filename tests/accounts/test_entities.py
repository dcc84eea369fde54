import pytest

from accounts.domain import User, UserGroup


def make_user(username):
    user = User()
    user.set_username(username)
    return user


class TestUser:
    def test_user_is_initialised_with_expected_values(self):
        user = User()

        assert user.id == 0
        assert user.is_transient()
        assert user.username == ""
        assert user.friendly_name == ""
        assert user.email_address == ""
        assert user.in_active is False
        assert user.deleted is False
        assert user.user_groups == []

    def test_set_username_fills_empty_friendly_name(self):
        user = make_user("DOMAIN\\jsmith")

        assert user.username == "DOMAIN\\jsmith"
        assert user.friendly_name == "DOMAIN\\jsmith"

    def test_set_username_keeps_existing_friendly_name(self):
        user = User()
        user.friendly_name = "John Smith"
        user.set_username("DOMAIN\\jsmith")

        assert user.friendly_name == "John Smith"

    def test_username_is_read_only(self):
        with pytest.raises(AttributeError):
            User().username = "someone"

    def test_username_is_the_business_signature(self):
        user = make_user("jsmith")
        user.email_address = "john@example.com"

        assert str(user) == "User: [Id:0] (username:jsmith, IsTransient:True)"
        assert user == make_user("jsmith")
        assert hash(user) == hash(make_user("jsmith"))
        assert user != make_user("jdoe")

    def test_persisted_users_are_equal_by_identifier(self):
        user1 = make_user("jsmith")
        user2 = make_user("renamed")
        user1._assign_id(10)
        user2._assign_id(10)

        assert user1 == user2
        assert hash(user1) == hash(user2)


class TestUserGroup:
    def test_user_group_is_initialised_with_expected_values(self):
        group = UserGroup()

        assert group.id == 0
        assert group.name == ""
        assert group.description == ""
        assert group.locked is False
        assert group.users == []

    def test_name_and_locked_are_the_business_signature(self):
        group = UserGroup("Admins", "Administrators")

        assert str(group) == "UserGroup: [Id:0] (name:Admins, locked:False, IsTransient:True)"
        assert group == UserGroup("Admins", "Other description")

    def test_locking_changes_the_business_signature(self):
        group = UserGroup("Admins")
        before = str(group)
        group.lock()

        assert str(group) == "UserGroup: [Id:0] (name:Admins, locked:True, IsTransient:True)"
        assert str(group) != before
        assert group != UserGroup("Admins")

        group.unlock()
        assert group == UserGroup("Admins")

    def test_locked_is_read_only(self):
        with pytest.raises(AttributeError):
            UserGroup().locked = True


class TestMembership:
    def test_add_user_group_links_both_sides(self):
        user = make_user("jsmith")
        group = UserGroup("Admins")

        user.add_user_group(group)

        assert user.user_groups == [group]
        assert group.users == [user]

    def test_add_user_links_both_sides(self):
        user = make_user("jsmith")
        group = UserGroup("Admins")

        group.add_user(user)

        assert user.user_groups == [group]
        assert group.users == [user]

    def test_adding_twice_is_idempotent(self):
        user = make_user("jsmith")
        group = UserGroup("Admins")

        user.add_user_group(group)
        group.add_user(user)
        user.add_user_group(group)

        assert len(user.user_groups) == 1
        assert len(group.users) == 1

    def test_remove_user_group_unlinks_both_sides(self):
        user = make_user("jsmith")
        group = UserGroup("Admins")
        user.add_user_group(group)

        user.remove_user_group(group)

        assert user.user_groups == []
        assert group.users == []

    def test_remove_user_unlinks_both_sides(self):
        user = make_user("jsmith")
        group = UserGroup("Admins")
        group.add_user(user)

        group.remove_user(user)

        assert user.user_groups == []
        assert group.users == []

    def test_removing_unlinked_user_is_a_no_op(self):
        user = make_user("jsmith")
        group = UserGroup("Admins")

        group.remove_user(user)
        user.remove_user_group(group)

        assert user.user_groups == []
        assert group.users == []

    def test_user_can_belong_to_several_groups(self):
        user = make_user("jsmith")
        admins = UserGroup("Admins")
        editors = UserGroup("Editors")

        user.add_user_group(admins)
        editors.add_user(user)

        assert user.user_groups == [admins, editors]
        assert admins.users == [user]
        assert editors.users == [user]
