from .password_reset_views import *
