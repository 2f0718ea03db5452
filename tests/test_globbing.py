"""Tests for file path glob matching."""

from dataclasses import dataclass

import pytest

from ng_explorer.globbing import clean_path, expand_braces, filter_by_path, match_path


@pytest.mark.parametrize(
    "path, pattern, expected",
    [
        ("src/app/user.ts", "src/app/**", True),
        ("src/app/dashboard/dashboard.component.ts", "src/app/**", True),
        ("./src/app/settings/settings.component.ts", "src/app/**", True),
        ("libs/charts/chart.component.ts", "src/app/**", False),
        ("src/app/user.ts", "src/*.ts", False),
        ("src/user.ts", "src/*.ts", True),
        ("src/app/shared/date-format.pipe.ts", "**/*.pipe.ts", True),
        ("date-format.pipe.ts", "**/*.pipe.ts", True),
        ("src/app/auth/auth.service.ts", "*.service.ts", True),
        ("src/app/auth/auth.guard.ts", "*.service.ts", False),
        ("apps/web/src/main.ts", "apps/**/main.ts", True),
        ("apps/web/src/main.ts", "apps/*/main.ts", False),
        ("src/app/user.ts", "src/app/use?.ts", True),
        ("src/app/user.ts", "./src/app/*.ts", True),
        ("src/app/user.ts", "src/{app,lib}/**", True),
        ("lib/core/api.ts", "src/{app,lib}/**", False),
        ("src/lib/core/api.ts", "src/{app,lib}/**", True),
        ("src/app/auth/auth.service.ts", "*.{service,pipe}.ts", True),
        ("src/app/shared/date-format.pipe.ts", "**/*.{service,pipe}.ts", True),
        ("src/app/user.ts", "*.{service,pipe}.ts", False),
        ("libs/charts/chart.component.ts", "{src/app,libs/{charts,legacy}}/**", True),
        ("libs/ui/button.component.ts", "{src/app,libs/{charts,legacy}}/**", False),
        ("src/{app}/x.ts", "src/{app}/*.ts", True),
    ],
)
def test_match_path(path, pattern, expected):
    assert match_path(path, pattern) is expected


def test_expand_braces():
    assert expand_braces("src/{app,lib}/**") == ("src/app/**", "src/lib/**")
    assert expand_braces("{a,{b,c}}.ts") == ("a.ts", "b.ts", "c.ts")
    assert expand_braces("{a,b}/{x,y}") == ("a/x", "a/y", "b/x", "b/y")
    assert expand_braces("plain/**") == ("plain/**",)


def test_clean_path():
    assert clean_path("./src/a.ts") == "src/a.ts"
    assert clean_path("src/a.ts") == "src/a.ts"


@dataclass
class _Item:
    file: str


def test_filter_is_idempotent_and_ordered():
    """Test filtering twice by the same pattern changes nothing."""
    items = [_Item("src/b.ts"), _Item("lib/a.ts"), _Item("./src/a.ts")]

    once = filter_by_path(items, "src/**")
    twice = filter_by_path(once, "src/**")

    assert [i.file for i in once] == ["src/b.ts", "./src/a.ts"]
    assert twice == once
