"""Ordered wizard steps and the routes of the navigation surface."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ROUTES",
    "WizardStep",
    "first_step",
    "last_step",
    "next_step",
    "previous_step",
    "step_for_route",
]


class WizardStep(IntEnum):
    """Steps of the resume wizard, numbered from 1 in display order."""

    WELCOME = 1
    TEMPLATE = 2
    PERSONAL = 3
    EDUCATION = 4
    EXPERIENCE = 5
    PREVIEW = 6

    @property
    def label(self) -> str:
        return _STEP_LABELS[self]

    @property
    def route(self) -> str:
        return _STEP_ROUTES[self]


_STEP_LABELS: dict[WizardStep, str] = {
    WizardStep.WELCOME: "Welcome",
    WizardStep.TEMPLATE: "Template",
    WizardStep.PERSONAL: "Personal",
    WizardStep.EDUCATION: "Education",
    WizardStep.EXPERIENCE: "Experience",
    WizardStep.PREVIEW: "Preview",
}

_STEP_ROUTES: dict[WizardStep, str] = {
    WizardStep.WELCOME: "/",
    WizardStep.TEMPLATE: "/template",
    WizardStep.PERSONAL: "/personal-details",
    WizardStep.EDUCATION: "/education",
    WizardStep.EXPERIENCE: "/work-experience",
    WizardStep.PREVIEW: "/preview",
}

# Every page reachable in the app, wizard steps first.
ROUTES: tuple[str, ...] = (
    *(_STEP_ROUTES[s] for s in WizardStep),
    "/resume-preview",
    "/account",
)


def first_step() -> WizardStep:
    return WizardStep.WELCOME


def last_step() -> WizardStep:
    return WizardStep.PREVIEW


def next_step(step: WizardStep) -> WizardStep | None:
    """Return the step after *step*, or ``None`` at the end."""
    if step is last_step():
        return None
    return WizardStep(step + 1)


def previous_step(step: WizardStep) -> WizardStep | None:
    """Return the step before *step*, or ``None`` at the start."""
    if step is first_step():
        return None
    return WizardStep(step - 1)


def step_for_route(route: str) -> WizardStep | None:
    """Return the wizard step served at *route*, if any."""
    for step, path in _STEP_ROUTES.items():
        if path == route:
            return step
    return None
