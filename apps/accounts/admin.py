# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for restaurant staff.

    Soft-deleted users stay listed here (filter by ``deleted_at``) so that
    their history remains reachable.
    """

    list_display = [
        'email',
        'name',
        'role',
        'is_active',
        'deleted_at',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'is_staff',
        ('deleted_at', admin.EmptyFieldListFilter),
    ]

    search_fields = ['email', 'name']

    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'name', 'role', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login', 'deleted_at'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']

    actions = ['soft_delete_users']

    @admin.action(description='Soft-delete selected users')
    def soft_delete_users(self, request, queryset):
        count = 0
        for user in queryset.filter(deleted_at__isnull=True):
            user.soft_delete()
            count += 1
        self.message_user(request, f'{count} user(s) soft-deleted.')
