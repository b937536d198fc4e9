from django.apps import AppConfig

class AccountsConfig(AppConfig):
    """Django app config for accounts and the password reset flow."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'
