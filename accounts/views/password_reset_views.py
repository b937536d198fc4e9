import logging

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.utils.decorators import method_decorator
from django.utils.translation import gettext as _
from django.views import View
from django.views.decorators.cache import never_cache
from django.views.generic import TemplateView

from accounts.exceptions import AccountNotFound, DispatchFailed, InvalidChoice
from accounts.forms import ChooseAccountForm, PasswordResetRequestForm
from accounts.repos.user_repo import UserRepo
from accounts.services import (
    AccountResolver,
    AuditLog,
    DisambiguationStep,
    FlowStorage,
    NotificationService,
    PasswordResetWorkflow,
    ResetDispatcher,
    Step,
)

logger = logging.getLogger(__name__)


@method_decorator(never_cache, name="dispatch")
class PasswordResetView(View):
    """Ask for a username or email, resolve conflicts, and mail reset instructions."""

    template_name = 'auth/password_reset.html'
    success_url = reverse_lazy('password_reset_done')
    cancel_url = reverse_lazy('password_reset')

    def dispatch(self, request, *args, **kwargs):
        """Build the flow collaborators once per request."""
        store = UserRepo()
        salt = settings.PASSWORD_RESET_HASH_SALT
        self.storage = FlowStorage(request.session, store, secret=salt)
        self.workflow = self.build_workflow(store, salt)
        return super().dispatch(request, *args, **kwargs)

    def build_workflow(self, store, salt):
        """Wire the workflow to its account store, notifier and audit log."""
        dispatcher = ResetDispatcher(NotificationService(), AuditLog())
        return PasswordResetWorkflow(AccountResolver(store, secret=salt), DisambiguationStep(), dispatcher)

    def get(self, request):
        """Render whichever step the flow is currently on."""
        state = self.storage.get()
        if state.step is Step.AWAITING_DISAMBIGUATION:
            return self._render_choice(state, ChooseAccountForm(choice=self.workflow.present(state)))
        return self._render_request(PasswordResetRequestForm(user=request.user))

    def post(self, request):
        """Process a submission for the current step."""
        state = self.storage.get()
        if state.step is Step.AWAITING_DISAMBIGUATION:
            return self._post_choice(request, state)
        return self._post_name(request, state)

    def _post_name(self, request, state):
        form = PasswordResetRequestForm(request.POST, user=request.user)
        if not form.is_valid():
            return self._render_request(form)
        try:
            transition = self.workflow.submit_name(
                state, form.cleaned_data["name"], request.user.is_authenticated
            )
        except AccountNotFound as e:
            form.add_error("name", self._not_found_message(e.name))
            return self._render_request(form)
        except DispatchFailed as e:
            logger.warning("Password reset dispatch failed for account %s", e.account.pk)
            messages.add_message(request, messages.ERROR, self._dispatch_failed_message())
            return self._render_request(form)
        return self._after(transition)

    def _post_choice(self, request, state):
        if "cancel" in request.POST:
            self.storage.set(self.workflow.cancel(state).state)
            return redirect(self.cancel_url)

        form = ChooseAccountForm(request.POST, choice=self.workflow.present(state))
        if not form.is_valid():
            return self._render_choice(state, form)
        try:
            transition = self.workflow.submit_choice(state, form.cleaned_data["choose_account"])
        except InvalidChoice:
            self.storage.clear()
            messages.add_message(request, messages.ERROR, self._invalid_choice_message())
            return redirect(self.cancel_url)
        except DispatchFailed as e:
            logger.warning("Password reset dispatch failed for account %s", e.account.pk)
            messages.add_message(request, messages.ERROR, self._dispatch_failed_message())
            return self._render_choice(state, form)
        return self._after(transition)

    def _after(self, transition):
        self.storage.set(transition.state)
        state = transition.state
        if state.step is Step.AWAITING_DISAMBIGUATION:
            return self._render_choice(state, ChooseAccountForm(choice=self.workflow.present(state)))
        messages.add_message(self.request, messages.SUCCESS, self._sent_message())
        return redirect(self.success_url)

    def _render_request(self, form):
        user = self.request.user
        return render(self.request, self.template_name, {
            "form": form,
            "step": Step.AWAITING_INPUT.value,
            "signed_in_email": user.email if user.is_authenticated else None,
        })

    def _render_choice(self, state, form):
        return render(self.request, self.template_name, {
            "form": form,
            "step": Step.AWAITING_DISAMBIGUATION.value,
            "name": state.name,
        })

    def _not_found_message(self, name):
        return _("Sorry, %(name)s is not recognized as a username or an email address.") % {"name": name}

    def _invalid_choice_message(self):
        return _("The selected account is no longer available. Please start again.")

    def _dispatch_failed_message(self):
        return _("Unable to send email. Contact the site administrator if the problem persists.")

    def _sent_message(self):
        return _("Further instructions have been sent to your email address.")


class PasswordResetDoneView(TemplateView):
    template_name = 'auth/password_reset_done.html'
