"""Two-step password reset state machine.

Every operation takes the current WorkflowState and returns a Transition
holding the next state; states are never modified in place. Errors
(AccountNotFound, InvalidChoice, DispatchFailed) propagate to the caller and
leave the flow in the state it was in.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from accounts.exceptions import InvalidTransition
from accounts.services.candidates import CandidateSet
from accounts.services.notifications import DeliveryStatus


class Step(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    AWAITING_DISAMBIGUATION = "awaiting_disambiguation"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WorkflowState:
    step: Step = Step.AWAITING_INPUT
    name: str = ""
    candidates: Optional[CandidateSet] = None

    @classmethod
    def initial(cls):
        return cls()

    @classmethod
    def disambiguating(cls, name, candidates):
        return cls(step=Step.AWAITING_DISAMBIGUATION, name=name, candidates=candidates)


@dataclass(frozen=True)
class Transition:
    state: WorkflowState
    outcome: Optional[DeliveryStatus] = None


class PasswordResetWorkflow:
    """Drive resolver, disambiguation and dispatcher through the flow's steps."""

    def __init__(self, resolver, disambiguation, dispatcher):
        self.resolver = resolver
        self.disambiguation = disambiguation
        self.dispatcher = dispatcher

    def submit_name(self, state, name, is_authenticated):
        """Handle the first step: resolve ``name`` and dispatch or ask to choose."""
        self._expect(state, Step.AWAITING_INPUT, "submit_name")
        name = (name or "").strip()
        candidates = self.resolver.resolve(name, is_authenticated)
        if len(candidates) > 1:
            return Transition(WorkflowState.disambiguating(name, candidates))
        return self._complete(candidates.first())

    def submit_choice(self, state, token):
        """Handle the second step: dispatch to the account behind ``token``."""
        self._expect(state, Step.AWAITING_DISAMBIGUATION, "submit_choice")
        account = self.disambiguation.choose(state.candidates, token, state.name)
        return self._complete(account)

    def cancel(self, state):
        """Abandon the choice step without sending anything."""
        self._expect(state, Step.AWAITING_DISAMBIGUATION, "cancel")
        return Transition(WorkflowState(step=Step.CANCELLED))

    def present(self, state):
        """Return the labelled choice for a state awaiting disambiguation."""
        self._expect(state, Step.AWAITING_DISAMBIGUATION, "present")
        return self.disambiguation.present(state.candidates, state.name)

    def _complete(self, account):
        outcome = self.dispatcher.dispatch(account)
        return Transition(WorkflowState(step=Step.COMPLETED), outcome=outcome)

    @staticmethod
    def _expect(state, step, action):
        if state.step is not step:
            raise InvalidTransition(state.step, action)
