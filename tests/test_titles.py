"""Tests for request path validation."""

import pytest
from pagewiki.core.titles import TitleMatch, match_path


class TestMatchPath:
    """Tests for match_path()."""

    @pytest.mark.parametrize("action", ["view", "edit", "save"])
    def test__valid_path__returns_action_and_title(self, action: str) -> None:
        """Extract action and title from each page route."""
        assert match_path(f"/{action}/FrontPage") == TitleMatch(action=action, title="FrontPage")

    def test__digits_and_mixed_case__accepted(self) -> None:
        """Accept any ASCII letters and digits."""
        assert match_path("/view/Page2024abcXYZ") == TitleMatch("view", "Page2024abcXYZ")

    @pytest.mark.parametrize(
        "path",
        [
            "/view/",
            "/view",
            "/view/a/b",
            "/view/a-b",
            "/view/a_b",
            "/view/a.txt",
            "/view/../../etc/passwd",
            "/view/..",
            "/view/Página",
            "/view/a\n",
            "/view/a ",
            "view/a",
            "/delete/a",
            "/View/a",
            "//view/a",
            "/view/a/",
        ],
    )
    def test__invalid_path__returns_none(self, path: str) -> None:
        """Reject paths outside the title pattern."""
        assert match_path(path) is None
