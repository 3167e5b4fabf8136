"""Single-writer container that owns the working resume draft.

Pages and API handlers never hold their own copy of the draft. They read
``store.state`` and change it through :meth:`ResumeStore.dispatch` (or the
convenience wrappers), so every change goes through a pure reducer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from resume_builder.models.resume import ResumeData
from resume_builder.state import reducers
from resume_builder.wizard.steps import WizardStep, first_step

logger = logging.getLogger(__name__)

__all__ = ["Listener", "ResumeStore"]

Listener = Callable[[ResumeData], None]


class ResumeStore:
    """Owns the current :class:`ResumeData` snapshot and the wizard step cursor."""

    def __init__(
        self,
        initial: ResumeData | None = None,
        step: WizardStep | None = None,
    ) -> None:
        self._state = initial if initial is not None else reducers.default_resume()
        self._step = step if step is not None else first_step()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ResumeData:
        return self._state

    @property
    def current_step(self) -> WizardStep:
        return self._step

    def set_step(self, step: WizardStep) -> None:
        """Move the cursor without validation; use ``wizard.navigation`` for user moves."""
        self._step = WizardStep(step)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every state change.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(
        self,
        reducer: Callable[..., ResumeData],
        *args: Any,
        **kwargs: Any,
    ) -> ResumeData:
        """Apply *reducer* to the current snapshot and publish the result.

        If the reducer raises, the current snapshot is kept and the error
        propagates.
        """
        new_state = reducer(self._state, *args, **kwargs)
        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return new_state

    def reset(self) -> None:
        """Restore the default draft and rewind to the first step."""
        self._step = first_step()
        self.dispatch(reducers.replace_state, reducers.default_resume())

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def update_personal_details(self, **fields: str) -> ResumeData:
        return self.dispatch(reducers.update_personal_details, **fields)

    def add_education(self, **fields: str) -> str:
        """Append an education entry and return its id."""
        state = self.dispatch(reducers.add_education, **fields)
        return state.education[-1].id

    def update_education(self, entry_id: str, **fields: str) -> ResumeData:
        return self.dispatch(reducers.update_education, entry_id, **fields)

    def remove_education(self, entry_id: str) -> ResumeData:
        return self.dispatch(reducers.remove_education, entry_id)

    def add_work_experience(self, **fields: str) -> str:
        """Append a work-experience entry and return its id."""
        state = self.dispatch(reducers.add_work_experience, **fields)
        return state.work_experience[-1].id

    def update_work_experience(self, entry_id: str, **fields: str) -> ResumeData:
        return self.dispatch(reducers.update_work_experience, entry_id, **fields)

    def remove_work_experience(self, entry_id: str) -> ResumeData:
        return self.dispatch(reducers.remove_work_experience, entry_id)

    def add_skill(self, name: str) -> str:
        """Append a skill and return its id."""
        state = self.dispatch(reducers.add_skill, name)
        return state.skills[-1].id

    def remove_skill(self, entry_id: str) -> ResumeData:
        return self.dispatch(reducers.remove_skill, entry_id)

    def select_template(self, template_id: str) -> ResumeData:
        return self.dispatch(reducers.select_template, template_id)

    def select_color_palette(self, palette_id: str) -> ResumeData:
        return self.dispatch(reducers.select_color_palette, palette_id)

    def load(self, state: ResumeData) -> ResumeData:
        """Replace the whole draft, e.g. with a saved snapshot."""
        logger.debug("Loading resume draft into store")
        return self.dispatch(reducers.replace_state, state)
