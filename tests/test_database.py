"""
StaffBot - Database Tests
=========================

Tests for the role binding store.
"""


class TestRoleBindings:
    """Tests for role binding operations."""

    def test_get_role_missing(self, test_db):
        """Test a guild without a binding returns None."""
        assert test_db.get_role(111, "staff") is None

    def test_set_and_get_role(self, test_db):
        """Test setting and getting a binding."""
        test_db.set_role(111, "staff", 555)
        assert test_db.get_role(111, "staff") == 555

    def test_set_role_replaces(self, test_db):
        """Test a second set replaces the previous role."""
        test_db.set_role(111, "staff", 555)
        test_db.set_role(111, "staff", 666)
        assert test_db.get_role(111, "staff") == 666
        assert test_db.get_roles(111) == {"staff": 666}

    def test_keys_are_case_insensitive(self, test_db):
        """Test keys are normalized to lower case."""
        test_db.set_role(111, "  Staff ", 555)
        assert test_db.get_role(111, "STAFF") == 555
        assert test_db.get_roles(111) == {"staff": 555}

    def test_bindings_are_per_guild(self, test_db):
        """Test one guild's binding is invisible to another."""
        test_db.set_role(111, "staff", 555)
        assert test_db.get_role(222, "staff") is None

    def test_bindings_are_per_key(self, test_db):
        """Test different keys in one guild are independent."""
        test_db.set_role(111, "staff", 555)
        test_db.set_role(111, "helper", 777)
        assert test_db.get_roles(111) == {"helper": 777, "staff": 555}

    def test_remove_role(self, test_db):
        """Test removing an existing binding."""
        test_db.set_role(111, "staff", 555)
        assert test_db.remove_role(111, "staff") is True
        assert test_db.get_role(111, "staff") is None

    def test_remove_role_missing(self, test_db):
        """Test removing a binding that does not exist."""
        assert test_db.remove_role(111, "staff") is False

    def test_get_roles_empty(self, test_db):
        assert test_db.get_roles(111) == {}


class TestDatabaseManager:
    """Tests for the manager itself."""

    def test_singleton(self, test_db):
        """Test get_db returns the initialized instance."""
        from staffbot.core.database import get_db
        assert get_db() is test_db

    def test_persists_across_reconnect(self, test_db):
        """Test data survives closing and reopening the connection."""
        test_db.set_role(111, "staff", 555)
        test_db.close()
        assert test_db.get_role(111, "staff") == 555

    def test_creates_parent_directory(self, tmp_path):
        """Test the database directory is created on startup."""
        from staffbot.core.database import manager as db_module

        db_module.DatabaseManager._instance = None
        path = tmp_path / "nested" / "dir" / "bot.db"
        try:
            db = db_module.DatabaseManager(path)
            assert path.parent.is_dir()
            assert db.db_path == path
            db.close()
        finally:
            db_module.DatabaseManager._instance = None
