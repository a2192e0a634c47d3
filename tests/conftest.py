"""Pytest configuration for the behavioural test suite.

Every Gherkin scenario under ``tests/features`` must be bound by a
``@scenario`` decorator in a module under ``tests/behaviour``; an unbound
scenario would otherwise never run. Each ``.feature`` file is collected as
one binding check per scenario it declares.
"""

from __future__ import annotations

import functools
import pathlib as pth

import pytest

from tests.helpers.gherkin import Binding, bound_scenarios, feature_scenario_titles

_BEHAVIOUR_DIR = pth.Path(__file__).parent / "behaviour"


@functools.cache
def _behaviour_bindings() -> frozenset[Binding]:
    return bound_scenarios(_BEHAVIOUR_DIR)


class FeatureBindingFile(pytest.File):
    """Collect a ``.feature`` file as one binding check per scenario."""

    def collect(self) -> list[pytest.Item]:
        """Return a binding check for every scenario in the file."""
        titles = feature_scenario_titles(self.path.read_text(encoding="utf-8"))
        if not titles:
            return [
                ScenarioBindingItem.from_parent(
                    self,
                    name="<no scenarios>",
                    title=None,
                ),
            ]
        return [
            ScenarioBindingItem.from_parent(self, name=title, title=title)
            for title in titles
        ]


class ScenarioBindingItem(pytest.Item):
    """Check that one Gherkin scenario is bound by a behaviour test."""

    def __init__(self, *, title: str | None, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.title = title

    def runtest(self) -> None:
        """Fail when the scenario has no ``@scenario`` binding."""
        if self.title is None:
            msg = f"{self.path} declares no scenarios."
            raise AssertionError(msg)
        if (self.path.name, self.title) not in _behaviour_bindings():
            msg = (
                f"scenario {self.title!r} in {self.path.name} is not bound by "
                f"any @scenario in {_BEHAVIOUR_DIR.name}/"
            )
            raise AssertionError(msg)

    def reportinfo(self) -> tuple[pth.Path, int | None, str]:
        """Report the feature file and scenario title."""
        return self.path, None, f"binding: {self.title}"


def pytest_collect_file(
    file_path: pth.Path,
    parent: pytest.Collector,
) -> FeatureBindingFile | None:
    """Collect ``.feature`` files as scenario binding checks."""
    if file_path.suffix != ".feature":
        return None
    return FeatureBindingFile.from_parent(parent, path=file_path)
