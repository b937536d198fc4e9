"""Keep the password reset flow between requests in the server-side session."""

from accounts.services.candidates import CandidateSet
from accounts.services.workflow import Step, WorkflowState

SESSION_KEY = "accounts.password_reset.flow"


class FlowStorage:
    """Store a WorkflowState in the session under a single key.

    Only account ids are written; accounts are loaded again through the
    account store on every read; once a blocked or deleted account drops
    out there is nothing to choose between and the flow starts over.
    Terminal states are never stored: saving one clears the flow.
    """

    def __init__(self, session, account_store, key=SESSION_KEY, secret=None):
        self.session = session
        self.account_store = account_store
        self.key = key
        self.secret = secret

    def get(self):
        data = self.session.get(self.key)
        if not data or data.get("step") != Step.AWAITING_DISAMBIGUATION.value:
            return WorkflowState.initial()
        accounts = self.account_store.find_active_by_ids(data.get("accounts", []))
        candidates = CandidateSet(accounts, secret=self.secret)
        if len(candidates) < CandidateSet.MAX_SIZE:
            # Nothing left to choose between.
            self.clear()
            return WorkflowState.initial()
        return WorkflowState.disambiguating(data.get("name", ""), candidates)

    def set(self, state):
        if state.step is not Step.AWAITING_DISAMBIGUATION:
            self.clear()
            return
        self.session[self.key] = {
            "step": state.step.value,
            "name": state.name,
            "accounts": state.candidates.account_ids(),
        }

    def clear(self):
        self.session.pop(self.key, None)
