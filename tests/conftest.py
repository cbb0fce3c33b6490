import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class SystemExitCalled(Exception):
    """Custom exception to simulate sys.exit behavior in tests"""

    def __init__(self, code):
        self.code = code
        super().__init__(f"sys.exit({code}) called")


@pytest.fixture
def mock_system_exit(mocker):
    """
    Fixture to mock sys.exit for testing exit behavior.

    Usage:
        def test_exit_behavior(mock_system_exit):
            with pytest.raises(SystemExitCalled) as exc_info:
                function_that_calls_sys_exit()
            assert exc_info.value.code == 1
    """

    def side_effect(code):
        raise SystemExitCalled(code)

    return mocker.patch("sys.exit", side_effect=side_effect)


@pytest.fixture
def mock_argv(mocker):
    """
    Fixture for running the driver with a given command line.

    Usage:
        def test_driver(mock_argv):
            mock_argv("-o", "h", "--", "-h")
            assert main() == 0
    """

    def _set_argv(*args):
        return mocker.patch("sys.argv", ["cgetopt", *args])

    return _set_argv


@pytest.fixture
def sample_specs():
    """Short and long option specs shared by the parser tests."""
    return {
        "short": "hrfi:Hw:",
        "long": [
            "help",
            "recursive",
            "force",
            "input=",
            "human-readable",
            "with-value=",
        ],
    }


@pytest.fixture
def debug_enabled(monkeypatch):
    """Fixture enabling driver debug output."""
    monkeypatch.setenv("CGETOPT_DEBUG", "1")
