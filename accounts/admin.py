from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from accounts.models import AuditEntry, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for accounts, exposing status and language."""
    list_display = ('username', 'email', 'is_active', 'preferred_language', 'is_staff')
    list_filter = ('is_active', 'is_staff', 'preferred_language')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Preferences', {'fields': ('preferred_language',)}),
    )
    actions = ['block_accounts', 'unblock_accounts']

    @admin.action(description='Block selected accounts')
    def block_accounts(self, request, queryset):
        """Mark selected accounts inactive."""
        queryset.update(is_active=False)

    @admin.action(description='Unblock selected accounts')
    def unblock_accounts(self, request, queryset):
        """Mark selected accounts active."""
        queryset.update(is_active=True)


@admin.register(AuditEntry)
class AuditEntryAdmin(admin.ModelAdmin):
    """Read-only view of the audit trail."""
    list_display = ('event', 'created_at', 'fields')
    list_filter = ('event', 'created_at')
    readonly_fields = ('event', 'fields', 'created_at')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
