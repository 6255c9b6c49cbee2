"""Tests for the user store functions against in-memory SQLite."""

import unittest
from unittest.mock import patch

from api_support import ROOT_ID, USER_ID, make_session_factory

from app.models import User
from app.scripts import create_user as create_user_script
from app.services.users import (
    UserConflictError,
    UserValidationError,
    create_user,
    delete_user,
    get_user,
    get_user_by_login,
    update_user,
    validate_fields,
)


class StoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.Session = make_session_factory()
        self.db = self.Session()

    def tearDown(self) -> None:
        self.db.close()
        self.Session.kw["bind"].dispose()


class TestLookups(StoreTestCase):
    """get_user and get_user_by_login."""

    def test_get_user(self) -> None:
        self.assertEqual(get_user(self.db, ROOT_ID).login, "root")
        self.assertIsNone(get_user(self.db, 999))

    def test_get_user_out_of_range(self) -> None:
        for user_id in (0, -1, 2**31, 10**30):
            self.assertIsNone(get_user(self.db, user_id))

    def test_get_user_by_login_prefers_lowest_id(self) -> None:
        create_user(self.db, "user", "", "other")
        self.assertEqual(get_user_by_login(self.db, "user").id, USER_ID)
        self.assertIsNone(get_user_by_login(self.db, "nobody"))


class TestValidateFields(unittest.TestCase):
    """Length limit of 8 on login, phone and pass."""

    def test_within_limit(self) -> None:
        validate_fields("12345678", "", "p")

    def test_reports_every_long_field(self) -> None:
        with self.assertRaises(UserValidationError) as ctx:
            validate_fields("x" * 9, "ok", "y" * 20)
        message = str(ctx.exception)
        self.assertIn("login:", message)
        self.assertIn("pass:", message)
        self.assertNotIn("phone:", message)


class TestWrites(StoreTestCase):
    """create_user, update_user and delete_user commit one row each."""

    def test_create(self) -> None:
        user = create_user(self.db, "bob", "555", "pw")
        self.assertIsNotNone(user.id)
        self.assertEqual(self.db.query(User).count(), 3)

    def test_create_conflict(self) -> None:
        with self.assertRaises(UserConflictError):
            create_user(self.db, "user", "1", "user")

    def test_constraint_backstop(self) -> None:
        with patch("app.services.users._ensure_unique"):
            with self.assertRaises(UserConflictError):
                create_user(self.db, "user", "1", "user")
        # Session is usable again after the rollback.
        self.assertEqual(self.db.query(User).count(), 2)

    def test_update_keeps_login_when_not_given(self) -> None:
        user = get_user(self.db, USER_ID)
        update_user(self.db, user, "123", "pw")
        self.assertEqual((user.login, user.phone, user.password), ("user", "123", "pw"))

    def test_update_rejected_leaves_row(self) -> None:
        user = get_user(self.db, USER_ID)
        with self.assertRaises(UserConflictError):
            update_user(self.db, user, "1", "root", login="root")
        with self.assertRaises(UserValidationError):
            update_user(self.db, user, "123456789", "pw")
        self.assertEqual((user.login, user.phone, user.password), ("user", "", "user"))

    def test_delete(self) -> None:
        delete_user(self.db, get_user(self.db, USER_ID))
        self.assertIsNone(get_user(self.db, USER_ID))


class TestCreateUserScript(StoreTestCase):
    """python -m app.scripts.create_user inserts through the store."""

    def test_creates_and_reports_conflict(self) -> None:
        with patch.object(create_user_script, "SessionLocal", self.Session):
            self.assertEqual(create_user_script.main(["alice", "pw", "555"]), 0)
            self.assertEqual(create_user_script.main(["alice", "pw"]), 1)
            self.assertEqual(create_user_script.main(["toolonglogin", "pw"]), 1)
        self.assertEqual(self.db.query(User).filter(User.login == "alice").count(), 1)


if __name__ == "__main__":
    unittest.main()
