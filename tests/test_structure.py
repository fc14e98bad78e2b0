"""
Structure lint tests.

Verify that components follow the functional-core / shell layout.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

COMPONENTS = ["users", "rules"]


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_component_files_exist(self) -> None:
        """Each component has entry points, models and ports."""
        for name in COMPONENTS:
            component_dir = PROJECT_ROOT / "src" / "components" / name
            for filename in ("__init__.py", "component.py", "models.py", "ports.py"):
                assert (component_dir / filename).is_file(), f"{name}/{filename} missing"

    def test_users_component_has_core_and_tests(self) -> None:
        users_dir = PROJECT_ROOT / "src" / "components" / "users"
        assert (users_dir / "_impl.py").is_file()
        assert (users_dir / "tests" / "test_unit.py").is_file()

    def test_tests_structure_exists(self) -> None:
        """Test directories must follow conventions."""
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_settings_and_dataset_present(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()
        assert (PROJECT_ROOT / "data" / "users.yaml").is_file()

    def test_core_does_not_log(self) -> None:
        """The query core stays free of I/O and logging."""
        source = (PROJECT_ROOT / "src" / "components" / "users" / "_impl.py").read_text()
        assert "import logging" not in source
        assert "print(" not in source
